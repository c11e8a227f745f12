"""Streaming HTTP response writer.

Handlers write to a ``ResponseWriter`` the way they would to a socket:
set a status and headers, write body chunks, end. Each step is emitted
immediately as an ASGI message through the writer's transmit callable,
so ``headers_sent`` reflects what is actually on the wire.
"""

from wren._internal.asgi import Transmit
from wren.errors import HeadersAlreadySent, ResponseFinished


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


def _encode(chunk: str | bytes) -> bytes:
    return chunk.encode("utf-8") if isinstance(chunk, str) else chunk


class ResponseWriter:
    """The outgoing side of one request.

    Usage::

        def hello(request, response, next):
            response.set_header("Content-Type", "text/plain")
            response.end("Hello World!")

    ``status_code`` defaults to 200 and may be assigned until the head is
    sent. The head goes out on ``write_head()``, on the first ``write()``,
    or on ``end()``, whichever comes first.
    """

    __slots__ = ("_finished", "_headers", "_headers_sent", "_transmit", "status_code")

    def __init__(self, transmit: Transmit) -> None:
        self._transmit = transmit
        self.status_code = 200
        # lowercase name -> (name as given, value)
        self._headers: dict[str, tuple[str, str]] = {}
        self._headers_sent = False
        self._finished = False

    # -- State --

    @property
    def headers_sent(self) -> bool:
        """True once the status line and headers have been emitted."""
        return self._headers_sent

    @property
    def finished(self) -> bool:
        """True once ``end()`` has been called."""
        return self._finished

    @property
    def headers(self) -> tuple[tuple[str, str], ...]:
        """Headers set so far, as ``(name, value)`` pairs."""
        return tuple(self._headers.values())

    # -- Headers --

    def set_header(self, name: str, value: str | int) -> None:
        """Set a header, replacing any previous value for *name*."""
        if self._headers_sent:
            raise HeadersAlreadySent("set header " + repr(name))
        self._headers[name.lower()] = (name, str(value))

    def get_header(self, name: str) -> str | None:
        """Return the value set for *name*, or ``None``."""
        entry = self._headers.get(name.lower())
        return entry[1] if entry is not None else None

    def has_header(self, name: str) -> bool:
        return name.lower() in self._headers

    def remove_header(self, name: str) -> None:
        if self._headers_sent:
            raise HeadersAlreadySent("remove header " + repr(name))
        self._headers.pop(name.lower(), None)

    def write_head(self, status: int, headers: dict[str, str] | None = None) -> None:
        """Emit the status line and headers.

        *headers* are merged over those already set with ``set_header()``.
        """
        if self._headers_sent:
            raise HeadersAlreadySent("write the status line")
        self.status_code = status
        for name, value in (headers or {}).items():
            self.set_header(name, value)
        self._headers_sent = True
        self._transmit(
            {
                "type": "http.response.start",
                "status": status,
                "headers": [
                    (name.lower().encode("latin-1"), value.encode("latin-1"))
                    for name, value in self._headers.values()
                ],
            }
        )

    # -- Body --

    def write(self, chunk: str | bytes) -> None:
        """Send a body chunk, emitting the head first if needed.

        Chunks are dropped for statuses that carry no body (1xx, 204, 304).
        """
        if self._finished:
            raise ResponseFinished
        if not self._headers_sent:
            self.write_head(self.status_code)
        data = _encode(chunk)
        if not data or not _body_allowed(self.status_code):
            return
        self._transmit({"type": "http.response.body", "body": data, "more_body": True})

    def end(self, chunk: str | bytes | None = None) -> None:
        """Finish the response, optionally with a last body chunk.

        When nothing has been sent yet, ``Content-Length`` is filled in
        from the final chunk. Calling ``end()`` twice is a no-op.
        """
        if self._finished:
            return
        data = _encode(chunk) if chunk is not None else b""
        if not _body_allowed(self.status_code):
            data = b""
        if not self._headers_sent:
            if not self.has_header("content-length"):
                self.set_header("Content-Length", len(data))
            self.write_head(self.status_code)
        self._finished = True
        self._transmit({"type": "http.response.body", "body": data, "more_body": False})
