"""Readiness-based event dispatch over sockets and file descriptors."""

from __future__ import annotations

import os
import selectors
import threading
from typing import Any, Callable, NoReturn

EventCallback = Callable[[Any, int], None]


class EventLoop:
    """Waits for readiness and calls the callback registered for each source.

    Registered sources are switched to non-blocking mode. Callbacks receive
    the registered object and the ready event mask.
    """

    def __init__(self, max_events: int = 1000) -> None:
        if max_events < 1:
            raise ValueError("max_events must be at least 1")
        self.max_events = max_events
        self._selector = selectors.DefaultSelector()
        self._callbacks: dict[int, EventCallback] = {}
        self._lock = threading.Lock()

    def add(self, sock: Any, events: int, callback: EventCallback) -> None:
        """Register *sock* (a socket-like object or fd) for *events*."""
        if isinstance(sock, int):
            os.set_blocking(sock, False)
        else:
            sock.setblocking(False)
        try:
            key = self._selector.register(sock, events)
        except (KeyError, ValueError) as exc:
            raise ValueError(f"Failed to add {sock!r} to the event loop") from exc
        with self._lock:
            self._callbacks[key.fd] = callback

    def run_once(self, timeout: float | None = None) -> int:
        """Wait once, dispatch up to ``max_events`` events, return how many."""
        ready = self._selector.select(timeout)[: self.max_events]
        for key, mask in ready:
            with self._lock:
                callback = self._callbacks.get(key.fd)
            if callback is not None:
                callback(key.fileobj, mask)
        return len(ready)

    def run(self) -> NoReturn:
        """Dispatch events forever."""
        while True:
            self.run_once()

    def close(self) -> None:
        """Release the underlying selector."""
        self._selector.close()
        with self._lock:
            self._callbacks.clear()

    def __enter__(self) -> EventLoop:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()