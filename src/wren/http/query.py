"""Query string parameters.

Parsed once per dispatch from the request URL and handed to every
matching entry as ``request.query``.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qsl


class QueryParams(Mapping[str, str]):
    """Read-only view of a URL query string.

    Looks like ``dict[str, str]``: a name repeated in the query string
    maps to its first value. Every value stays reachable through
    ``get_list``::

        q = QueryParams("tag=a&tag=b&page=")
        q["tag"]            # "a"
        q.get_list("tag")   # ["a", "b"]
        q["page"]           # ""
    """

    __slots__ = ("_raw", "_values")

    def __init__(self, query_string: str = "") -> None:
        values: dict[str, list[str]] = {}
        for name, value in parse_qsl(query_string, keep_blank_values=True):
            values.setdefault(name, []).append(value)
        self._values = values
        self._raw = query_string

    @property
    def raw(self) -> str:
        """The query string exactly as received (without ``?``)."""
        return self._raw

    def __getitem__(self, name: str) -> str:
        return self._values[name][0]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __repr__(self) -> str:
        return f"QueryParams({dict(self)!r})"

    def get_list(self, name: str) -> list[str]:
        return list(self._values.get(name, ()))
