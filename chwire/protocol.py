"""Packet type codes and flags of the native protocol."""

from enum import IntEnum, unique


@unique
class ServerCode(IntEnum):
    """Types of packets received from the server."""

    HELLO = 0
    DATA = 1
    EXCEPTION = 2
    PROGRESS = 3
    PONG = 4
    END_OF_STREAM = 5
    PROFILE_INFO = 6
    TOTALS = 7
    EXTREMES = 8
    TABLES_STATUS_RESPONSE = 9
    LOG = 10
    TABLE_COLUMNS = 11
    PART_UUIDS = 12
    READ_TASK_REQUEST = 13
    PROFILE_EVENTS = 14


@unique
class ClientCode(IntEnum):
    """Types of packets sent by the client."""

    HELLO = 0
    QUERY = 1
    DATA = 2
    CANCEL = 3
    PING = 4


@unique
class CompressionState(IntEnum):
    """Whether data blocks are compressed."""

    DISABLE = 0
    ENABLE = 1


@unique
class Stage(IntEnum):
    """Query processing stage requested from the server."""

    COMPLETE = 2