"""Flatten nested handler lists passed to the registration API."""

from collections.abc import Iterable, Iterator
from typing import Any


def flatten(items: Iterable[Any]) -> Iterator[Any]:
    """Yield leaves of arbitrarily nested lists and tuples, in order.

    Only ``list`` and ``tuple`` are descended into; callables (including
    callable objects that happen to be iterable) are yielded as-is::

        list(flatten([a, [b, (c,)], d]))  # [a, b, c, d]
    """
    for item in items:
        if isinstance(item, (list, tuple)):
            yield from flatten(item)
        else:
            yield item
