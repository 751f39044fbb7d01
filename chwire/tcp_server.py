"""A local TCP listener that accepts connections but never answers them."""

from __future__ import annotations

import socket
from typing import Any, Optional


class LocalTcpServer:
    """Listens on the loopback interface; connections queue up and are never served."""

    def __init__(self, port: int) -> None:
        self.port = port
        self._socket: Optional[socket.socket] = None

    @property
    def running(self) -> bool:
        """Whether the server is currently listening."""
        return self._socket is not None

    def start(self) -> None:
        """Bind to the loopback address and start listening.

        Raises RuntimeError when the socket cannot be created or bound.
        """
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as exc:
            raise RuntimeError("Error establishing server socket") from exc
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        except OSError:
            pass
        try:
            sock.bind(("127.0.0.1", self.port))
        except OSError as exc:
            sock.close()
            raise RuntimeError(
                f"Error binding socket to local address: {exc.strerror or ''}"
            ) from exc
        sock.listen(3)
        self.port = sock.getsockname()[1]
        self._socket = sock

    def stop(self) -> None:
        """Stop listening; does nothing when not started."""
        sock, self._socket = self._socket, None
        if sock is None:
            return
        try:
            sock.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass
        sock.close()

    def __enter__(self) -> LocalTcpServer:
        self.start()
        return self

    def __exit__(self, *args: Any) -> None:
        self.stop()