"""Incremental parser that turns raw request bytes into an HttpRequest."""

from __future__ import annotations

import re
from datetime import datetime
from enum import Enum, auto

from zhttp.request import HttpRequest, Method

_CRLF = b"\r\n"
_METHODS = {method.name: method for method in Method if method is not Method.INVALID}
_VERSIONS = frozenset({"HTTP/1.0", "HTTP/1.1"})
_LENGTH_RE = re.compile(r"\s*\+?(\d+)")


class ParseState(Enum):
    """Stage the parser has reached within a request."""

    EXPECT_REQUEST_LINE = auto()
    EXPECT_HEADERS = auto()
    EXPECT_BODY = auto()
    EXPECT_COMPLETE = auto()


def _parse_content_length(text: str) -> int:
    match = _LENGTH_RE.match(text)
    if match is None:
        raise ValueError(f"invalid Content-Length: {text!r}")
    return int(match.group(1))


class HttpContext:
    """Checks incoming request data and builds an HttpRequest from it.

    Data is consumed from the front of the buffer given to ``parse_request``,
    so the parser can be fed repeatedly as more bytes arrive.
    """

    def __init__(self) -> None:
        self.state = ParseState.EXPECT_REQUEST_LINE
        self._request = HttpRequest()

    @property
    def request(self) -> HttpRequest:
        """The request parsed so far."""
        return self._request

    @property
    def complete(self) -> bool:
        """Whether the whole request, body included, has been parsed."""
        return self.state is ParseState.EXPECT_COMPLETE

    def parse_request(self, buffer: bytearray, receive_time: datetime) -> bool:
        """Consume what can be parsed from ``buffer``.

        Returns False when the buffer is empty, when a line is malformed, or
        when a line is still incomplete; True otherwise.
        """
        if not buffer:
            return False
        while True:
            end = buffer.find(_CRLF)
            if end == -1:
                if self.state is ParseState.EXPECT_BODY:
                    self._parse_body(buffer)
                    return True
                return False
            line = bytes(buffer[:end]).decode("latin-1")
            del buffer[: end + len(_CRLF)]
            if self.state is ParseState.EXPECT_REQUEST_LINE:
                if not self._parse_request_line(line, receive_time):
                    return False
            elif self.state is ParseState.EXPECT_HEADERS:
                if not self._parse_headers(line):
                    return False

    def _parse_request_line(self, line: str, receive_time: datetime) -> bool:
        pos = line.find(" ")
        if pos == -1:
            return False
        method = _METHODS.get(line[:pos])
        if method is None:
            return False
        self._request.method = method

        question = line.find("?")
        second_space = line.find(" ", pos + 1)
        if second_space == -1:
            return False

        if question != -1:
            self._request.path = line[pos + 1:question]
            query_end = second_space if second_space > question else len(line)
            self._request.set_query_parameters(line[question + 1:query_end])
        else:
            self._request.path = line[pos + 1:second_space]

        version = line[second_space + 1:]
        if version not in _VERSIONS:
            return False
        self._request.version = version

        self.state = ParseState.EXPECT_HEADERS
        self._request.receive_time = receive_time
        return True

    def _parse_headers(self, line: str) -> bool:
        colon = line.find(":")
        if colon != -1:
            self._request.set_header(line[:colon], line[colon + 1:])
            return True
        if not line:
            length = self._request.header("Content-Length")
            if length:
                self._request.content_length = _parse_content_length(length)
            self.state = ParseState.EXPECT_BODY
            return True
        return False

    def _parse_body(self, buffer: bytearray) -> None:
        length = self._request.content_length
        if len(buffer) >= length:
            self._request.content = bytes(buffer[:length]).decode("utf-8", errors="surrogateescape")
            del buffer[:length]
            self.state = ParseState.EXPECT_COMPLETE