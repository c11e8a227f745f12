"""Request dispatch — walk the route entries for one request.

Entries are considered strictly in registration order. For each entry:

1. Gate: skip it if its method differs from the request's, or if its
   path rule does not match. On a match, ``request.params`` and
   ``request.query`` are overwritten.
2. Invoke: a ``Normal`` handler runs only while no error is in flight,
   an ``ErrorHandling`` handler only while one is. Any other pairing is
   skipped with the current error carried forward.
3. Signal: the handler hands control back through ``next``:

   - ``next()``          continue with the following entry, error cleared
   - ``next.route()``    drop the rest of this entry's group, error cleared
   - ``next(error)``     continue with the following entry, carrying *error*

An exception raised by the handler call is treated as ``next(exc)``.
When no entries remain, the default responder gets the final error state.

The walk is an explicit loop, so long registries never grow the call
stack. A handler that returns without signalling keeps the response; if
it calls ``next`` later (for example from a thread it started), the walk
resumes from there on the calling thread. Exceptions raised by such
deferred work never reach the dispatcher.
"""

import logging
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

from wren.http.query import QueryParams
from wren.http.request import Request
from wren.http.response import ResponseWriter
from wren.routing.route import ErrorHandling, Normal, RouteEntry

logger = logging.getLogger("wren.routing")


# -- Error state --


@dataclass(frozen=True, slots=True)
class Failure:
    """An application error in flight. ``payload`` is whatever was raised or passed."""

    payload: Any


# -- Step results --


@dataclass(frozen=True, slots=True)
class Continue:
    """Move on to the next entry with no error."""


@dataclass(frozen=True, slots=True)
class SkipGroup:
    """Abandon the remaining entries of the current group, clearing the error."""


@dataclass(frozen=True, slots=True)
class Fail:
    """Move on to the next entry carrying ``error``."""

    error: Any


Signal: TypeAlias = Continue | SkipGroup | Fail

# Called when the entries run out: (error payload or None, request, response)
Responder: TypeAlias = Callable[[Any, Request, ResponseWriter], None]


class Next:
    """The continuation handed to each invoked handler.

    Single-use: the first call decides what happens next, later calls are
    logged and ignored.
    """

    __slots__ = ("_dispatch", "_lock", "_pending", "_signal", "_used")

    def __init__(self, dispatch: "Dispatch") -> None:
        self._dispatch = dispatch
        self._lock = threading.Lock()
        # True while the handler call is still on the stack
        self._pending = True
        self._signal: Signal | None = None
        self._used = False

    def __call__(self, error: Any = None) -> None:
        """Continue the chain; pass a truthy *error* to fail it.

        Empty values (``None``, ``""``, ``False``, ``0``) mean "no error".
        """
        self._settle(Fail(error) if error else Continue())

    def route(self) -> None:
        """Skip the remaining handlers registered together with this one."""
        self._settle(SkipGroup())

    def _settle(self, signal: Signal) -> None:
        with self._lock:
            if self._used:
                logger.warning(
                    "next() called more than once for %s %s; ignoring %r",
                    self._dispatch.request.method,
                    self._dispatch.request.url,
                    signal,
                )
                return
            self._used = True
            if self._pending:
                self._signal = signal
                return
        self._dispatch.resume(signal)

    def _fail_in_call(self, exc: Exception) -> None:
        """Record a failure raised by the handler call itself."""
        with self._lock:
            self._used = True
            self._signal = Fail(exc)

    def _release(self) -> Signal | None:
        """Close the synchronous window; return what the handler signalled."""
        with self._lock:
            self._pending = False
            return self._signal


class Dispatch:
    """The walk state for one request. Never shared between requests."""

    __slots__ = (
        "_error",
        "_index",
        "_path",
        "_pending",
        "_query",
        "_responder",
        "request",
        "response",
    )

    def __init__(
        self,
        request: Request,
        response: ResponseWriter,
        entries: Sequence[RouteEntry],
        responder: Responder,
    ) -> None:
        self.request = request
        self.response = response
        self._pending: Sequence[RouteEntry] = entries
        self._index = 0
        self._error: Failure | None = None
        self._responder = responder
        self._path = request.path
        self._query = QueryParams(request.query_string)

    def run(self) -> None:
        """Walk entries until a handler keeps the response or the list runs out."""
        while self._index < len(self._pending):
            entry = self._pending[self._index]
            signal = self._step(entry)
            if signal is None:
                return
            self._apply(entry, signal)
        self._responder(
            self._error.payload if self._error is not None else None,
            self.request,
            self.response,
        )

    def resume(self, signal: Signal) -> None:
        """Continue a walk parked on the current entry."""
        self._apply(self._pending[self._index], signal)
        self.run()

    def _carry(self) -> Signal:
        """Skip the current entry, keeping whatever error is in flight."""
        if self._error is None:
            return Continue()
        return Fail(self._error.payload)

    def _step(self, entry: RouteEntry) -> Signal | None:
        """Gate and invoke one entry. ``None`` means the handler kept control."""
        if entry.method is not None and entry.method != self.request.method:
            return self._carry()

        params = entry.matcher.match(self._path)
        if params is None:
            return self._carry()
        self.request.params = params
        self.request.query = self._query

        handler = entry.handler
        if self._error is not None and isinstance(handler, ErrorHandling):
            args: tuple[Any, ...] = (self._error.payload, self.request, self.response)
        elif self._error is None and isinstance(handler, Normal):
            args = (self.request, self.response)
        else:
            return self._carry()

        next_ = Next(self)
        try:
            handler.fn(*args, next_)
        except Exception as exc:
            logger.debug(
                "handler %r raised on %s %s",
                handler.fn,
                self.request.method,
                self.request.url,
                exc_info=True,
            )
            next_._fail_in_call(exc)
        return next_._release()

    def _apply(self, entry: RouteEntry, signal: Signal) -> None:
        match signal:
            case Continue():
                self._error = None
                self._index += 1
            case Fail(error=error):
                self._error = Failure(error)
                self._index += 1
            case SkipGroup():
                self._error = None
                self._pending = tuple(
                    e for e in self._pending[self._index + 1 :] if e.group_id != entry.group_id
                )
                self._index = 0


def dispatch(
    request: Request,
    response: ResponseWriter,
    entries: Sequence[RouteEntry],
    *,
    responder: Responder,
) -> None:
    """Run *request* through *entries* with no error in flight."""
    Dispatch(request, response, entries, responder).run()
