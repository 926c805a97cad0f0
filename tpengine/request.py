"""Parsing of raw HTTP/1.x request text."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_WORD = re.compile(r"[^ \t\n\v\f\r]+")


class _Cursor:
    """Reads a string line by line while remembering the position."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def readline(self) -> str | None:
        if self.pos >= len(self.text):
            return None
        end = self.text.find("\n", self.pos)
        if end < 0:
            line = self.text[self.pos:]
            self.pos = len(self.text)
        else:
            line = self.text[self.pos:end]
            self.pos = end + 1
        return line

    def skip(self, char: str) -> None:
        if self.text.startswith(char, self.pos):
            self.pos += len(char)

    def rest(self) -> str:
        return self.text[self.pos:]


@dataclass
class HttpRequest:
    """A parsed HTTP request: request line, headers and body."""

    method: str = ""
    path: str = ""
    version: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""

    @classmethod
    def parse(cls, raw_request: str | bytes) -> HttpRequest:
        """Parse raw request text; bytes are read as Latin-1.

        Raises ValueError for a header line that ends right after its colon.
        """
        if isinstance(raw_request, (bytes, bytearray)):
            raw_request = bytes(raw_request).decode("latin-1")

        request = cls()
        cursor = _Cursor(raw_request)

        first = cursor.readline()
        if first is not None:
            parts = _WORD.findall(first)[:3]
            parts += [""] * (3 - len(parts))
            request.method, request.path, request.version = parts

        while line := cursor.readline():
            line = line.removesuffix("\r")
            if not line:
                break
            key, sep, _ = line.partition(":")
            if not sep:
                continue
            if len(key) + 1 == len(line):
                raise ValueError(f"malformed header line: {line!r}")
            request.headers[key] = line[len(key) + 2:]

        cursor.skip("\r")
        cursor.skip("\n")
        request.body = cursor.rest()
        return request

    def header(self, key: str) -> str:
        """Return the value of header *key*, or an empty string."""
        return self.headers.get(key, "")