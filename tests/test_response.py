import pytest

from zhttp.response import HttpResponse, StatusCode


def test_version():
    resp = HttpResponse()
    resp.version = "HTTP/1.1"
    assert resp.version == "HTTP/1.1"


def test_status_code_and_message():
    resp = HttpResponse()
    resp.status_code = StatusCode.NOT_FOUND
    resp.status_message = "Not Found"
    assert resp.status_code is StatusCode.NOT_FOUND
    assert resp.status_message == "Not Found"


@pytest.mark.parametrize(
    "status_code, expected_line",
    [
        (StatusCode.NOT_FOUND, b"HTTP/1.1 404 Msg\r\n"),
        (StatusCode.CREATED, b"HTTP/1.1 201 Msg\r\n"),
        (StatusCode.UNKNOWN, b"HTTP/1.1 0 Msg\r\n"),
    ],
)
def test_status_code_values_in_status_line(status_code, expected_line):
    resp = HttpResponse()
    resp.set_response_line("HTTP/1.1", status_code, "Msg")
    assert resp.encode().startswith(expected_line)


def test_set_response_line():
    resp = HttpResponse()
    resp.set_response_line("HTTP/1.0", StatusCode.OK, "OK")
    assert resp.version == "HTTP/1.0"
    assert resp.status_code is StatusCode.OK
    assert resp.status_message == "OK"


def test_header():
    resp = HttpResponse()
    resp.set_header("Content-Type", "text/plain")
    assert resp.header("Content-Type") == "text/plain"
    assert resp.header("Not-Exist") == ""


def test_body():
    resp = HttpResponse()
    resp.body = "hello world"
    assert resp.body == "hello world"


def test_content_type_and_length():
    resp = HttpResponse()
    resp.set_content_type("application/json")
    resp.set_content_length(123)
    assert resp.header("Content-Type") == "application/json"
    assert resp.header("Content-Length") == "123"


def test_negative_content_length_rejected():
    resp = HttpResponse()
    with pytest.raises(ValueError):
        resp.set_content_length(-1)


def test_keep_alive():
    resp = HttpResponse()
    resp.keep_alive = True
    assert resp.keep_alive is True
    assert resp.header("Connection") == "keep-alive"
    resp.keep_alive = False
    assert resp.keep_alive is False
    assert resp.header("Connection") == "close"


def test_encode():
    resp = HttpResponse()
    resp.set_response_line("HTTP/1.1", StatusCode.OK, "OK")
    resp.set_header("Content-Type", "text/html")
    resp.body = "abc"
    result = resp.encode()
    assert b"HTTP/1.1 200 OK" in result
    assert b"Content-Type: text/html" in result
    assert b"\r\n\r\nabc" in result


def test_encode_exact_layout():
    resp = HttpResponse()
    resp.set_response_line("HTTP/1.1", StatusCode.NOT_FOUND, "Not Found")
    resp.set_content_length(0)
    assert resp.encode() == b"HTTP/1.1 404 Not Found\r\nContent-Length: 0\r\n\r\n"


def test_encode_bytes_body():
    resp = HttpResponse()
    resp.set_response_line("HTTP/1.0", StatusCode.OK, "OK")
    resp.body = b"\x00\x01"
    assert resp.encode().endswith(b"\r\n\r\n\x00\x01")