"""Request routing and per-connection handling."""

from __future__ import annotations

import socket

from .request import HttpRequest
from .response import HttpResponse

BUFFER_SIZE = 1024
NOT_FOUND_BODY = '{"error": "Not Found"}'
_ROUTES = {
    "GET": '{"message": "GET request received"}',
    "POST": '{"message": "POST request received"}',
}


def build_response(request: HttpRequest) -> HttpResponse:
    """Answer GET and POST with 200, anything else with 404."""
    body = _ROUTES.get(request.method)
    if body is None:
        return HttpResponse(request.version, 404, NOT_FOUND_BODY)
    return HttpResponse(request.version, 200, body)


def handle_client(conn: socket.socket) -> None:
    """Read one request from *conn*, write the response and close it."""
    if conn.fileno() < 0:
        raise ValueError("Accept failed")
    with conn:
        try:
            data = conn.recv(BUFFER_SIZE)
        except OSError:
            data = b""
        request = HttpRequest.parse(data.split(b"\0", 1)[0])
        conn.sendall(build_response(request).to_bytes())