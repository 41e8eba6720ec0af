"""Builder for HTTP/RTSP response messages."""

from __future__ import annotations

from typing import Optional, Union

_Text = Union[str, bytes]


def _as_bytes(value: _Text) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


class HttpResponse:
    """An HTTP response assembled line by line and finished with a body."""

    def __init__(self, protocol: _Text, code: int, message: _Text) -> None:
        if not 100 <= code < 1000:
            raise ValueError(f"status code out of range: {code}")
        self.complete = False
        self.disconnect = False
        self._data = bytearray()
        self._data += _as_bytes(protocol) + b" " + str(code).encode() + b" "
        self._data += _as_bytes(message) + b"\r\n"

    def add_header(self, name: _Text, value: _Text) -> None:
        self._data += _as_bytes(name) + b": " + _as_bytes(value) + b"\r\n"

    def finish(self, data: Optional[bytes] = None) -> None:
        """Terminate the headers, adding Content-Length and the body if present."""
        if data:
            self._data += b"Content-Length: " + str(len(data)).encode() + b"\r\n\r\n"
            self._data += data
        else:
            self._data += b"\r\n"
        self.complete = True

    def get_data(self) -> bytes:
        if not self.complete:
            raise RuntimeError("response is not finished")
        return bytes(self._data)