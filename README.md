# zhttp

Building blocks for a small HTTP/1.x server:

- `zhttp.request` provides `HttpRequest` and the `Method` enum (`GET`, `POST`, `PUT`, `DELETE`, `HEAD`, `OPTIONS`, plus `INVALID`). A request holds its method, path, version, headers, query parameters, path parameters, body (`content`), `content_length` and the time it was received (`receive_time`).
- `zhttp.response` provides `HttpResponse` and the `StatusCode` enum. `encode()` turns a response into bytes you can write to a socket.
- `zhttp.context` provides `HttpContext`, an incremental request parser, and the `ParseState` enum that tracks how far the parser has got.
- `zhttp.router` provides `Router`. It sends a request either to a handler object (a subclass of `RouterHandler`) or to a plain callable. The module also has `convert_to_regex`, which turns a path pattern into a compiled regular expression.

## Installation

```
pip install .
```

To install the test dependencies as well, use `pip install .[test]`. Then run the tests with `pytest`.

## Parsing a request

```python
from datetime import datetime

from zhttp.context import HttpContext

buffer = bytearray(b"GET /api/test?page=2 HTTP/1.1\r\nHost: localhost\r\n\r\n")
context = HttpContext()
if context.parse_request(buffer, datetime.now()) and context.complete:
    request = context.request
    print(request.method, request.path, request.query_parameter("page"))
```

The parser works through three stages in order: the request line, then the headers, then a body that is `Content-Length` bytes long. `parse_request` removes from `buffer` only the bytes it has consumed, and anything after the request stays in the buffer.

`parse_request` returns `False` in these cases:

- the buffer is empty;
- the request line or a header line is malformed;
- the current line has not yet arrived in full.

If the headers have been read but the body is not yet complete, it returns `True` and `complete` stays `False`. Append more bytes to the buffer and call it again.

Details of the parsing:

- Only `HTTP/1.0` and `HTTP/1.1` are accepted as the version.
- A header name loses its trailing whitespace and a header value loses its leading whitespace.
- A repeated header replaces the earlier value.
- A `Content-Length` value that does not start with a number raises `ValueError`.

## Routing

```python
from zhttp.request import HttpRequest, Method
from zhttp.response import HttpResponse, StatusCode
from zhttp.router import Router, RouterHandler


class Hello(RouterHandler):
    def handle_request(self, request, response):
        response.status_code = StatusCode.OK
        response.body = "hello " + request.path


def show_item(request, response):
    response.status_code = StatusCode.OK
    response.body = request.path_parameter("param1") + "-" + request.path_parameter("param2")


router = Router()
router.register_handler("/hello", Method.GET, Hello())
router.register_regex_callback("/api/:type/:id", Method.GET, show_item)

request = HttpRequest(method=Method.GET, path="/api/book/99")
response = HttpResponse()
router.route(request, response)       # True; response.body == "book-99"
```

`route` tries routes in this order:

1. exact-path handlers;
2. exact-path callbacks;
3. pattern handlers, in the order they were registered;
4. pattern callbacks, in the order they were registered.

It returns `False` when no route matches both the method and the path. A pattern route receives a copy of the request, with the captured segments stored as `param1`, `param2`, and so on. The request object you passed in is left unchanged.

## Writing a response

```python
from zhttp.response import HttpResponse, StatusCode

response = HttpResponse()
response.set_response_line("HTTP/1.1", StatusCode.OK, "OK")
response.set_content_type("text/plain")
response.body = "abc"
response.set_content_length(len(response.body))
response.keep_alive = True            # sets "Connection: keep-alive"
wire = response.encode()
```

`body` can be `str`, which is encoded as UTF-8, or `bytes`. `set_content_length` raises `ValueError` for a negative length.

## What this package does not do

zhttp does not open sockets, accept connections or run an event loop, and it provides no command-line program. Reading bytes from the network, passing them to `HttpContext`, and writing the output of `HttpResponse.encode()` back to the client are left to your application.