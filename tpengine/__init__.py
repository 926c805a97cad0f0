"""A small HTTP server: request parsing, JSON replies, a worker thread pool and a selector event loop."""

__version__ = "0.1.0"
__all__ = ["event_loop", "handler", "request", "response", "server", "thread_pool"]