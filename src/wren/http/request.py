"""HTTP request.

Transport metadata (method, URL, path, headers, body) is fixed at
creation. The dispatcher writes the match results (``params`` and
``query``) onto the request each time an entry matches.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from wren._internal.asgi import Scope
from wren.http.headers import Headers
from wren.http.query import QueryParams


def split_url(url: str) -> tuple[str, str]:
    """Split a request target into its path and raw query string.

    The target is origin-form (path plus optional query), never a full
    URL, so a leading ``//`` belongs to the path::

        "/users?page=2" -> ("/users", "page=2")
        "/users"        -> ("/users", "")
        "//admin"       -> ("//admin", "")
    """
    path, _, query = url.partition("?")
    return path, query


@dataclass(slots=True)
class Request:
    """An inbound HTTP request.

    ``url`` is the request target as received. ``path`` is what routes
    match against; when not given it is split off ``url``. Requests
    built from ASGI take ``path`` from the scope, already percent-decoded,
    so an encoded ``?`` or ``#`` stays part of the path.

    ``params`` holds the capture groups of the most recent matching
    entry, index-addressed. ``query`` is parsed once per dispatch and
    assigned on the first match. ``state`` is free for middleware to pass
    values down the chain::

        def load_user(request, response, next):
            request.state["user"] = lookup(request.headers.get("authorization"))
            next()
    """

    method: str
    url: str
    headers: Headers = field(default_factory=Headers)
    body: bytes = b""
    http_version: str = "1.1"
    client: tuple[str, int] | None = None
    path: str = ""
    query_string: str = ""

    # Written by the dispatcher on every successful match
    params: list[str | None] = field(default_factory=list)
    query: QueryParams = field(default_factory=QueryParams)

    # Per-request scratch space for middleware
    state: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.path:
            self.path, self.query_string = split_url(self.url)

    @property
    def text(self) -> str:
        """The body decoded as UTF-8."""
        return self.body.decode("utf-8")

    # -- Factory --

    @classmethod
    def from_asgi(cls, scope: Scope, body: bytes = b"") -> Request:
        """Create a Request from an ASGI scope and an already-read body."""
        path = scope["path"]
        query_string = scope.get("query_string", b"").decode("latin-1")
        raw_path = scope.get("raw_path")
        url = raw_path.decode("latin-1") if raw_path else path
        if query_string:
            url = f"{url}?{query_string}"
        client = scope.get("client")
        return cls(
            method=scope["method"],
            url=url,
            headers=Headers(tuple(scope.get("headers", ()))),
            body=body,
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
            path=path,
            query_string=query_string,
        )
