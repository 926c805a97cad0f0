import socket

import pytest

from tpengine.handler import build_response, handle_client
from tpengine.request import HttpRequest


def _recv_all(sock):
    sock.settimeout(5)
    chunks = []
    while chunk := sock.recv(4096):
        chunks.append(chunk)
    return b"".join(chunks)


def _exchange(payload, shutdown=False):
    server_side, client_side = socket.socketpair()
    with client_side:
        if payload:
            client_side.sendall(payload)
        if shutdown:
            client_side.shutdown(socket.SHUT_WR)
        handle_client(server_side)
        assert server_side.fileno() == -1
        return _recv_all(client_side)


def test_build_response_get():
    response = build_response(HttpRequest(method="GET", version="HTTP/1.1"))
    assert response.status_code == 200
    assert response.body == '{"message": "GET request received"}'


def test_build_response_post():
    response = build_response(HttpRequest(method="POST", version="HTTP/1.1"))
    assert response.status_code == 200
    assert response.body == '{"message": "POST request received"}'


def test_build_response_other_method_is_not_found():
    response = build_response(HttpRequest(method="PUT", version="HTTP/1.0"))
    assert response.status_code == 404
    assert response.body == '{"error": "Not Found"}'
    assert response.http_version == "HTTP/1.0"


def test_handle_client_get():
    data = _exchange(b"GET / HTTP/1.1\r\nHost: localhost\r\n\r\n")
    assert data.startswith(b"HTTP/1.1 200 OK\r\n")
    assert data.endswith(b'{"message": "GET request received"}')


def test_handle_client_post():
    data = _exchange(b"POST /items HTTP/1.1\r\n\r\nbody")
    assert data.endswith(b'{"message": "POST request received"}')


def test_handle_client_unknown_method():
    data = _exchange(b"PATCH /x HTTP/1.1\r\n\r\n")
    assert data.startswith(b"HTTP/1.1 404 OK\r\n")
    assert data.endswith(b'{"error": "Not Found"}')


def test_handle_client_stops_at_nul_byte():
    data = _exchange(b"GET / HTTP/1.1\r\n\r\n\0trailing")
    assert data.startswith(b"HTTP/1.1 200 OK\r\n")


def test_handle_client_empty_request():
    data = _exchange(b"", shutdown=True)
    assert data.startswith(b" 404 OK\r\n")


def test_handle_client_closed_socket():
    sock = socket.socket()
    sock.close()
    with pytest.raises(ValueError):
        handle_client(sock)