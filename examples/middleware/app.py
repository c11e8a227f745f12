"""Middleware — function and class middleware examples.

Demonstrates:
- Function middleware (timing, adds X-Response-Time header)
- Class middleware (rate limiter, 5 requests per window per client)
- The built-in CORS middleware
- threading.Lock for shared state, since handlers run in worker threads

Run:
    cd examples/middleware && python app.py
"""

import threading
import time

from wren import App, Next, Request, ResponseWriter, cors

app = App()


# ---------------------------------------------------------------------------
# Function middleware: timing
# ---------------------------------------------------------------------------


def timing(request: Request, response: ResponseWriter, next: Next) -> None:
    """Record when the request entered the chain; handlers stamp the header."""
    request.state["started"] = time.monotonic()
    next()


def stamp_elapsed(request: Request, response: ResponseWriter) -> None:
    elapsed = time.monotonic() - request.state["started"]
    response.set_header("X-Response-Time", f"{elapsed:.3f}s")


# ---------------------------------------------------------------------------
# Class middleware: rate limiter
# ---------------------------------------------------------------------------


class RateLimiter:
    """Per-client rate limiter. Answers 429 when the limit is exceeded."""

    def __init__(self, max_requests: int, window: float) -> None:
        self.max_requests = max_requests
        self.window = window
        self._hits: dict[str, list[float]] = {}
        self._lock = threading.Lock()

    def __call__(self, request: Request, response: ResponseWriter, next: Next) -> None:
        client = request.client[0] if request.client else "unknown"
        now = time.monotonic()
        with self._lock:
            hits = [t for t in self._hits.get(client, []) if now - t < self.window]
            hits.append(now)
            self._hits[client] = hits
            limited = len(hits) > self.max_requests
        if limited:
            response.write_head(429, {"Retry-After": str(int(self.window))})
            response.end("Too Many Requests")
            return
        next()


app.use(timing, RateLimiter(max_requests=5, window=60.0))
app.use(cors(origin=["http://localhost:3000"], methods=["GET", "POST"]))


@app.get("/")
def index(request, response, next):
    stamp_elapsed(request, response)
    response.end("ok")


if __name__ == "__main__":
    app.listen(3000)
