"""HTTP request model: method, path, version, parameters, headers and body."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Method(Enum):
    """Request methods the server understands."""

    INVALID = 0
    GET = 1
    POST = 2
    PUT = 3
    DELETE = 4
    HEAD = 5
    OPTIONS = 6


@dataclass
class HttpRequest:
    """A parsed HTTP request."""

    method: Method = Method.INVALID
    path: str = ""
    version: str = ""
    receive_time: datetime | None = None
    content: str = ""
    content_length: int = 0
    headers: dict[str, str] = field(default_factory=dict)
    path_parameters: dict[str, str] = field(default_factory=dict)
    query_parameters: dict[str, str] = field(default_factory=dict)

    def set_path_parameter(self, key: str, value: str) -> None:
        """Store a parameter captured from the request path."""
        self.path_parameters[key] = value

    def path_parameter(self, key: str) -> str:
        """Return a path parameter, or an empty string when it is absent."""
        return self.path_parameters.get(key, "")

    def set_query_parameters(self, query: str) -> None:
        """Parse a query string such as ``page=2&size=10`` into parameters.

        Parsing stops at the first segment without an ``=``.
        """
        pos = 0
        while pos < len(query):
            equal_pos = query.find("=", pos)
            if equal_pos == -1:
                break
            amp_pos = query.find("&", equal_pos)
            if amp_pos == -1:
                amp_pos = len(query)
            self.query_parameters[query[pos:equal_pos]] = query[equal_pos + 1:amp_pos]
            pos = amp_pos + 1

    def query_parameter(self, key: str) -> str:
        """Return a query parameter, or an empty string when it is absent."""
        return self.query_parameters.get(key, "")

    def set_header(self, key: str, value: str) -> None:
        """Store a header, trimming trailing space from the name and leading space from the value."""
        trimmed_key = key.rstrip() or key[:1]
        self.headers[trimmed_key] = value.lstrip()

    def header(self, key: str) -> str:
        """Return a header value, or an empty string when it is absent."""
        return self.headers.get(key, "")

    def copy(self) -> HttpRequest:
        """Return an independent copy of this request."""
        return dataclasses.replace(
            self,
            headers=dict(self.headers),
            path_parameters=dict(self.path_parameters),
            query_parameters=dict(self.query_parameters),
        )