"""The listening server: accepts connections and hands them to workers."""

from __future__ import annotations

import argparse
import selectors
import socket
import sys
from concurrent.futures import Future

from .event_loop import EventLoop
from .handler import handle_client
from .thread_pool import ThreadPool

HOST = "127.0.0.1"
PORT = 8080
BACKLOG = 10
MAX_EVENTS = 10000
POOL_NUMBERS = 4


def create_server_socket(host: str = HOST, port: int = PORT, backlog: int = BACKLOG) -> socket.socket:
    """Return a listening TCP socket bound to *host*:*port*."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(backlog)
    except OSError:
        sock.close()
        raise
    return sock


def _serve_client(conn: socket.socket) -> None:
    try:
        handle_client(conn)
    except Exception as exc:
        print(f"Error handling request: {exc}", file=sys.stderr)
    finally:
        conn.close()


def handle_accept(server_sock: socket.socket, events: int, pool: ThreadPool) -> Future | None:
    """Accept one connection when readable and queue it on *pool*."""
    if not events & selectors.EVENT_READ:
        return None
    try:
        conn, _ = server_sock.accept()
    except OSError:
        print("Accept failed.", file=sys.stderr)
        return None
    conn.setblocking(True)
    try:
        return pool.enqueue(_serve_client, conn)
    except RuntimeError:
        conn.close()
        raise


def serve(
    host: str = HOST,
    port: int = PORT,
    workers: int = POOL_NUMBERS,
    max_events: int = MAX_EVENTS,
) -> None:
    """Listen on *host*:*port* and serve requests forever."""
    with ThreadPool(workers) as pool, create_server_socket(host, port) as server_sock:
        print(f"Server listening on port {server_sock.getsockname()[1]}...", flush=True)
        with EventLoop(max_events) as loop:
            loop.add(
                server_sock,
                selectors.EVENT_READ,
                lambda sock, events: handle_accept(sock, events, pool),
            )
            loop.run()


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="tpengine", description="Small threaded HTTP server.")
    parser.add_argument("--host", default=HOST)
    parser.add_argument("--port", type=int, default=PORT)
    parser.add_argument("--workers", type=int, default=POOL_NUMBERS)
    parser.add_argument("--max-events", type=int, default=MAX_EVENTS)
    args = parser.parse_args(argv)
    try:
        serve(args.host, args.port, args.workers, args.max_events)
    except OSError as exc:
        print(f"Server failed: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())