"""Protocol constants, error types and test helpers for the ClickHouse native protocol."""

__version__ = "2.5.1"

__all__ = [
    "comparison",
    "error_codes",
    "exceptions",
    "generators",
    "protocol",
    "tcp_server",
    "utils",
    "version",
]