"""Exception hierarchy used by the client and the error info sent by a server."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class Error(RuntimeError):
    """Base class of every error raised by the client."""


class ValidationError(Error):
    """Invalid user input, such as wrong column types or bad arguments."""


class ProtocolError(Error):
    """Buffer or I/O failure, (de)serialization failure, checksum mismatch."""


class UnimplementedError(Error):
    """A feature that is not supported."""


class InternalAssertionError(Error):
    """An internal consistency check failed."""


class OpenSSLError(Error):
    """A failure reported by the TLS layer."""


class CompressionError(Error):
    """A failure while compressing or decompressing data."""


@dataclass
class ServerErrorInfo:
    """Details of an exception received from the server."""

    code: int = 0
    name: str = ""
    display_text: str = ""
    stack_trace: str = ""
    nested: Optional[ServerErrorInfo] = None


class ServerException(Error):
    """An exception the server reported while executing a request."""

    def __init__(self, exception: ServerErrorInfo) -> None:
        super().__init__(exception.display_text)
        self._exception = exception

    @property
    def code(self) -> int:
        """The server's error code."""
        return self._exception.code

    @property
    def exception(self) -> ServerErrorInfo:
        """The full error information sent by the server."""
        return self._exception

    def __str__(self) -> str:
        return self._exception.display_text


ServerError = ServerException