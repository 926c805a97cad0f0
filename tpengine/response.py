"""Serialisation of HTTP responses."""

from __future__ import annotations


class HttpResponse:
    """An HTTP response with a fixed set of headers and a text body."""

    def __init__(
        self,
        http_version: str,
        status_code: int,
        body: str,
        content_type: str = "application/json",
    ) -> None:
        self.http_version = http_version
        self.status_code = status_code
        self.body = body
        self.headers: dict[str, str] = {
            "Content-Type": content_type,
            "Connection": "close",
        }
        if body:
            self.headers["Content-Length"] = str(len(body.encode("utf-8")))

    def __str__(self) -> str:
        status_line = f"{self.http_version} {self.status_code} OK\r\n"
        header_block = "".join(f"{key}: {value}\r\n" for key, value in self.headers.items())
        return f"{status_line}{header_block}\r\n{self.body}"

    def to_bytes(self) -> bytes:
        """Return the response as UTF-8 encoded wire bytes."""
        return str(self).encode("utf-8")