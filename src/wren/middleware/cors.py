"""Built-in middleware: CORS.

Sets cross-origin response headers from a small, fixed configuration and
always hands control to the next handler. Preflight ``OPTIONS`` requests
are not answered here; register a route for them if needed.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from wren.http.request import Request
from wren.http.response import ResponseWriter
from wren.routing.dispatch import Next


@dataclass(frozen=True, slots=True)
class CORSConfig:
    """CORS middleware configuration.

    ``origin`` is required: only the exact origins listed are echoed back
    in ``Access-Control-Allow-Origin``::

        CORSConfig(
            origin=("https://example.com",),
            methods=("GET", "POST"),
        )
    """

    origin: tuple[str, ...]
    methods: tuple[str, ...] = ("GET",)


class CORSMiddleware:
    """Minimal CORS middleware.

    On every request:
    - reflects ``Access-Control-Request-Headers`` as ``Access-Control-Allow-Headers``
    - sets ``Access-Control-Allow-Methods`` from the configured methods
    - sets ``Access-Control-Allow-Origin`` when the request origin is allowed

    Usage::

        app.use(CORSMiddleware(CORSConfig(origin=("https://example.com",))))
    """

    __slots__ = ("config",)

    def __init__(self, config: CORSConfig) -> None:
        self.config = config

    @property
    def allow_methods(self) -> str:
        return ",".join(self.config.methods) or "GET"

    def __call__(self, request: Request, response: ResponseWriter, next: Next) -> None:
        """Set CORS headers and continue."""
        # No way to configure allowed headers; reflect what was asked for.
        requested = request.headers.get("access-control-request-headers")
        if requested:
            response.set_header("Access-Control-Allow-Headers", requested)

        response.set_header("Access-Control-Allow-Methods", self.allow_methods)

        origin = request.headers.get("origin")
        if origin and origin in self.config.origin:
            response.set_header("Access-Control-Allow-Origin", origin)

        next()


def cors(*, origin: Iterable[str], methods: Iterable[str] | None = None) -> CORSMiddleware:
    """Build a CORS middleware from plain options.

    Usage::

        app.use(cors(origin=["https://example.com"], methods=["GET", "POST"]))
    """
    config = CORSConfig(origin=tuple(origin))
    if methods is not None:
        config = CORSConfig(origin=config.origin, methods=tuple(methods))
    return CORSMiddleware(config)
