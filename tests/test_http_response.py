import pytest

from airmirror.http_response import HttpResponse


def test_empty_response_layout():
    response = HttpResponse("RTSP/1.0", 200, "OK")
    response.finish()
    assert response.get_data() == b"RTSP/1.0 200 OK\r\n\r\n"


def test_headers_in_order():
    response = HttpResponse("HTTP/1.1", 404, "Not Found")
    response.add_header("CSeq", "3")
    response.add_header("Server", "AirTunes/220.68")
    response.finish(b"")
    assert response.get_data() == (
        b"HTTP/1.1 404 Not Found\r\nCSeq: 3\r\nServer: AirTunes/220.68\r\n\r\n"
    )


def test_body_gets_content_length():
    body = b"hello"
    response = HttpResponse("RTSP/1.0", 200, "OK")
    response.add_header("CSeq", "1")
    response.finish(body)
    data = response.get_data()
    head, _, tail = data.partition(b"\r\n\r\n")
    assert tail == body
    assert head.split(b"\r\n")[-1] == b"Content-Length: " + str(len(body)).encode()
    assert head.split(b"\r\n")[1] == b"CSeq: 1"


def test_large_body_preserved():
    body = bytes(range(256)) * 10
    response = HttpResponse("HTTP/1.1", 200, "OK")
    response.finish(body)
    assert response.get_data().endswith(body)


@pytest.mark.parametrize("code", [99, 1000, 0])
def test_invalid_code_raises(code):
    with pytest.raises(ValueError):
        HttpResponse("HTTP/1.1", code, "Bad")


def test_get_data_before_finish_raises():
    response = HttpResponse("HTTP/1.1", 200, "OK")
    with pytest.raises(RuntimeError):
        response.get_data()


def test_disconnect_flag():
    response = HttpResponse("HTTP/1.1", 200, "OK")
    assert response.disconnect is False
    response.disconnect = True
    assert response.disconnect is True
    assert response.complete is False