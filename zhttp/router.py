"""Dispatch of requests to handlers by method and path."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Union

from zhttp.request import HttpRequest, Method
from zhttp.response import HttpResponse

HandlerCallback = Callable[[HttpRequest, HttpResponse], None]

_PARAM_RE = re.compile(r"/:([^/]+)")


class RouterHandler(ABC):
    """Object-style request handler, for routes whose handling is involved."""

    @abstractmethod
    def handle_request(self, request: HttpRequest, response: HttpResponse) -> None:
        """Handle ``request`` by filling in ``response``."""


def convert_to_regex(path: str) -> re.Pattern[str]:
    """Turn a path like ``/users/:id`` into ``^/users/([^/]+)$``."""
    return re.compile("^" + _PARAM_RE.sub("/([^/]+)", path) + "$")


@dataclass(frozen=True)
class _RegexRoute:
    pattern: re.Pattern[str]
    method: Method
    target: Union[RouterHandler, HandlerCallback]


def _with_path_parameters(match: re.Match[str], request: HttpRequest) -> HttpRequest:
    routed = request.copy()
    for index, value in enumerate(match.groups(default=""), start=1):
        routed.set_path_parameter(f"param{index}", value)
    return routed


class Router:
    """Routes requests to exact or parameterised handlers and callbacks.

    Lookup order: exact handlers, exact callbacks, pattern handlers, pattern
    callbacks, each pattern list in registration order.
    """

    def __init__(self) -> None:
        self._handlers: dict[tuple[Method, str], RouterHandler] = {}
        self._callbacks: dict[tuple[Method, str], HandlerCallback] = {}
        self._regex_handlers: list[_RegexRoute] = []
        self._regex_callbacks: list[_RegexRoute] = []

    def register_handler(self, path: str, method: Method, handler: RouterHandler) -> None:
        """Register a handler object for an exact path."""
        self._handlers[(method, path)] = handler

    def register_callback(self, path: str, method: Method, callback: HandlerCallback) -> None:
        """Register a callable for an exact path."""
        self._callbacks[(method, path)] = callback

    def register_regex_handler(self, path: str, method: Method, handler: RouterHandler) -> None:
        """Register a handler object for a path with ``:name`` segments."""
        self._regex_handlers.append(_RegexRoute(convert_to_regex(path), method, handler))

    def register_regex_callback(self, path: str, method: Method, callback: HandlerCallback) -> None:
        """Register a callable for a path with ``:name`` segments."""
        self._regex_callbacks.append(_RegexRoute(convert_to_regex(path), method, callback))

    def route(self, request: HttpRequest, response: HttpResponse) -> bool:
        """Dispatch ``request``; return whether a route handled it.

        Pattern routes receive a copy of the request carrying the captured
        segments as ``param1``, ``param2``, ...
        """
        key = (request.method, request.path)

        handler = self._handlers.get(key)
        if handler is not None:
            handler.handle_request(request, response)
            return True

        callback = self._callbacks.get(key)
        if callback is not None:
            callback(request, response)
            return True

        for route in self._regex_handlers:
            match = route.pattern.fullmatch(request.path)
            if match and route.method == request.method:
                route.target.handle_request(_with_path_parameters(match, request), response)
                return True

        for route in self._regex_callbacks:
            match = route.pattern.fullmatch(request.path)
            if match and route.method == request.method:
                route.target(_with_path_parameters(match, request), response)
                return True

        return False