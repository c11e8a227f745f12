"""Ordered, append-only route registry.

Appends publish a new immutable tuple under a lock (copy-on-write), so a
dispatch that took a snapshot with ``entries`` never observes a
partially-updated list, even when registration and serving interleave.
"""

import itertools
import logging
import re
import threading
from collections.abc import Iterable, Iterator

from wren._internal.flatten import flatten
from wren.routing.matcher import MOUNT_MATCHER, PathMatcher, compile_path
from wren.routing.route import RouteEntry, as_handler

logger = logging.getLogger("wren.routing")


class Registry:
    """Process-wide ordered list of route entries.

    Usage::

        registry = Registry()
        registry.register("GET", "/", hello)
        registry.mount(cors_middleware)
        for entry in registry.entries:
            ...
    """

    __slots__ = ("_entries", "_group_ids", "_lock")

    def __init__(self) -> None:
        self._entries: tuple[RouteEntry, ...] = ()
        self._group_ids = itertools.count(1)
        self._lock = threading.Lock()

    @property
    def entries(self) -> tuple[RouteEntry, ...]:
        """An immutable snapshot of the current entries."""
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RouteEntry]:
        return iter(self._entries)

    def register(
        self,
        method: str | None,
        path: str | re.Pattern[str],
        *handlers: object,
    ) -> int:
        """Append one entry per handler under a fresh group id.

        *method* ``None`` matches any method. Returns the group id.
        """
        return self._append(method.upper() if method else None, compile_path(path), handlers)

    def mount(self, *handlers: object) -> int:
        """Append method-agnostic entries that match every path."""
        return self._append(None, MOUNT_MATCHER, handlers)

    def _append(
        self,
        method: str | None,
        matcher: PathMatcher,
        handlers: Iterable[object],
    ) -> int:
        tagged = [as_handler(h) for h in flatten(handlers)]
        with self._lock:
            group_id = next(self._group_ids)
            new = tuple(RouteEntry(group_id, method, matcher, h) for h in tagged)
            self._entries = (*self._entries, *new)
        logger.debug(
            "registered group %d: %s %s (%d handlers)",
            group_id,
            method or "*",
            matcher.pattern.pattern,
            len(tagged),
        )
        return group_id
