# tpengine

A small HTTP server. One thread watches the listening socket with a readiness
event loop (`tpengine.event_loop.EventLoop`, built on `selectors`). Each
accepted connection is passed to a fixed pool of worker threads
(`tpengine.thread_pool.ThreadPool`). A worker reads one request, sends one
JSON reply and closes the connection.

## What it answers

| Method     | Status | Body                                        |
|------------|--------|---------------------------------------------|
| `GET`      | 200    | `{"message": "GET request received"}`       |
| `POST`     | 200    | `{"message": "POST request received"}`      |
| any other  | 404    | `{"error": "Not Found"}`                    |

Every reply has `Content-Type: application/json` and `Connection: close`, plus
`Content-Length` when the body is not empty. The reply's HTTP version is
copied from the request. The status line always carries the reason phrase
`OK`, whatever the status code.

## Running

```
pip install .
tpengine
```

By default the server listens on `127.0.0.1:8080` with 4 worker threads and
dispatches at most 10000 events per wait. All of these can be changed:

```
tpengine --host 127.0.0.1 --port 9000 --workers 8 --max-events 1000
```

`tpengine` returns 1 if the socket cannot be set up (for example, the port is
in use) and stops cleanly on Ctrl-C. Try it:

```
curl -i http://127.0.0.1:8080/
curl -i -X POST -d 'hello' http://127.0.0.1:8080/
```

## Using the pieces

Parse a request and build the reply for it:

```python
from tpengine.request import HttpRequest
from tpengine.handler import build_response

request = HttpRequest.parse("GET /index HTTP/1.1\r\nHost: localhost\r\n\r\n")
request.method           # "GET"
request.path             # "/index"
request.header("Host")   # "localhost"
request.header("Accept") # "" (missing headers give an empty string)
reply = build_response(request)
print(reply.to_bytes())
```

`HttpRequest.parse` takes `str` or `bytes` (bytes are read as Latin-1). It
raises `ValueError` for a header line that ends right after its colon.

Build a reply directly:

```python
from tpengine.response import HttpResponse

reply = HttpResponse("HTTP/1.1", 200, '{"ok": true}', "application/json")
text = str(reply)
raw = reply.to_bytes()
```

Run work on the thread pool; `enqueue` returns a `concurrent.futures.Future`:

```python
from tpengine.thread_pool import ThreadPool

with ThreadPool(4) as pool:
    future = pool.enqueue(sum, [1, 2, 3])
    print(future.result())   # 6
```

Leaving the `with` block (or calling `shutdown()`) runs every task already
queued and joins the workers. After that, `enqueue` raises `RuntimeError`.

Watch sockets with the event loop:

```python
import selectors
from tpengine.event_loop import EventLoop

with EventLoop(max_events=100) as loop:
    loop.add(sock, selectors.EVENT_READ, lambda s, mask: print("ready", s))
    loop.run_once(timeout=1.0)   # returns the number of events dispatched
```

`add` switches the socket (or raw file descriptor) to non-blocking mode.
`run()` dispatches events forever.

Start a server from your own code:

```python
from tpengine.server import serve

serve("127.0.0.1", 8080, 4, 10000)
```

## What it does not do

- It does not route by path: only the method decides the reply.
- It reads at most 1024 bytes of each request and answers one request per
  connection; there is no keep-alive and no reading of longer bodies.
- It serves no files and no TLS.

## Tests

```
pip install .[test]
pytest
```