"""HTTP response model and its wire encoding."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

DELIM = "\r\n"


class StatusCode(IntEnum):
    """Response status codes."""

    UNKNOWN = 0
    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NO_CONTENT = 204
    MOVED_PERMANENTLY = 301
    FOUND = 302
    NOT_MODIFIED = 304
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    BAD_GATEWAY = 502


@dataclass
class HttpResponse:
    """An HTTP response being built by a handler."""

    version: str = ""
    status_code: StatusCode = StatusCode.UNKNOWN
    status_message: str = ""
    body: str | bytes = ""
    headers: dict[str, str] = field(default_factory=dict)
    _keep_alive: bool = field(default=False, repr=False)

    def set_response_line(self, version: str, status_code: StatusCode, status_message: str) -> None:
        """Set version, status code and status message at once."""
        self.version = version
        self.status_code = status_code
        self.status_message = status_message

    def set_header(self, key: str, value: str) -> None:
        """Set a header, replacing any previous value."""
        self.headers[key] = value

    def header(self, key: str) -> str:
        """Return a header value, or an empty string when it is absent."""
        return self.headers.get(key, "")

    def set_content_type(self, content_type: str) -> None:
        """Set the Content-Type header."""
        self.set_header("Content-Type", content_type)

    def set_content_length(self, length: int) -> None:
        """Set the Content-Length header."""
        if length < 0:
            raise ValueError(f"content length must not be negative: {length}")
        self.set_header("Content-Length", str(length))

    @property
    def keep_alive(self) -> bool:
        """Whether the connection is to be kept open."""
        return self._keep_alive

    @keep_alive.setter
    def keep_alive(self, value: bool) -> None:
        self._keep_alive = value
        self.set_header("Connection", "keep-alive" if value else "close")

    def encode(self) -> bytes:
        """Serialise the status line, headers and body for sending."""
        head = f"{self.version} {int(self.status_code)} {self.status_message}{DELIM}"
        head += "".join(f"{key}: {value}{DELIM}" for key, value in self.headers.items())
        head += DELIM
        body = self.body.encode("utf-8") if isinstance(self.body, str) else bytes(self.body)
        return head.encode("utf-8") + body