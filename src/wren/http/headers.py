"""Request headers.

ASGI hands headers over as a list of ``(bytes, bytes)`` pairs. They are
decoded once, here, and looked up by lowercase name afterwards.
"""

from collections.abc import Iterable, Iterator, Mapping


def _decode(raw: Iterable[tuple[bytes, bytes]]) -> dict[str, list[str]]:
    decoded: dict[str, list[str]] = {}
    for name, value in raw:
        decoded.setdefault(name.decode("latin-1").lower(), []).append(value.decode("latin-1"))
    return decoded


class Headers(Mapping[str, str]):
    """Case-insensitive, read-only request headers.

    Indexing returns the first value sent under a name; ``get_list``
    returns all of them in arrival order. Iteration yields lowercase
    names.
    """

    __slots__ = ("_fields",)

    def __init__(self, raw: Iterable[tuple[bytes, bytes]] = ()) -> None:
        self._fields = _decode(raw)

    @classmethod
    def from_mapping(cls, headers: Mapping[str, str]) -> "Headers":
        """Build headers from a plain ``{name: value}`` mapping."""
        return cls((k.encode("latin-1"), v.encode("latin-1")) for k, v in headers.items())

    def __getitem__(self, name: str) -> str:
        try:
            return self._fields[name.lower()][0]
        except KeyError:
            raise KeyError(name) from None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"Headers({dict(self)!r})"

    def get_list(self, name: str) -> list[str]:
        return list(self._fields.get(name.lower(), ()))
