"""Wren application class.

Holds the route registry and exposes the registration surface, the
serve surface (``handle``), the ASGI entry point, and the listener.
"""

import re
from collections.abc import Callable
from typing import Any, TypeAlias

from wren._internal.asgi import Receive, Scope, Send
from wren.config import AppConfig
from wren.http.request import Request
from wren.http.response import ResponseWriter
from wren.routing.dispatch import dispatch
from wren.routing.registry import Registry
from wren.server.fallback import respond
from wren.server.handler import handle_request

Path: TypeAlias = str | re.Pattern[str]


class App:
    """The wren application.

    Routes and middleware are appended to one ordered registry and
    considered in that order for every request::

        app = App()
        app.use(cors(origin=["https://example.com"]))

        @app.get("/")
        def index(request, response, next):
            response.end("Hello World!")

        @app.get(r"/users/(\\d+)")
        def user(request, response, next):
            response.end(f"user {request.params[0]}")

        app.listen(3000)

    Every registration method takes handlers directly
    (``app.get("/", a, [b, c])``) or, called with none, returns a
    decorator. Entries passed in one call form one group for
    ``next.route()``.

    Thread safety:
        Registration may interleave with serving. Each request walks a
        snapshot of the registry taken when its dispatch starts.
    """

    __slots__ = ("_registry", "config")

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._registry = Registry()

    @property
    def registry(self) -> Registry:
        return self._registry

    # -- Route registration --

    def route(self, method: str | None, path: Path, *handlers: Any) -> Callable[[Any], Any] | None:
        """Register handlers for *method* (``None`` = any) at *path*.

        *path* is matched against the whole request path. A string is
        read as a regular expression, so capture groups work in either
        form and are exposed as ``request.params``.
        """
        if handlers:
            self._registry.register(method, path, *handlers)
            return None

        def decorator(func: Any) -> Any:
            self._registry.register(method, path, func)
            return func

        return decorator

    def get(self, path: Path, *handlers: Any) -> Callable[[Any], Any] | None:
        return self.route("GET", path, *handlers)

    def post(self, path: Path, *handlers: Any) -> Callable[[Any], Any] | None:
        return self.route("POST", path, *handlers)

    def put(self, path: Path, *handlers: Any) -> Callable[[Any], Any] | None:
        return self.route("PUT", path, *handlers)

    def patch(self, path: Path, *handlers: Any) -> Callable[[Any], Any] | None:
        return self.route("PATCH", path, *handlers)

    def delete(self, path: Path, *handlers: Any) -> Callable[[Any], Any] | None:
        return self.route("DELETE", path, *handlers)

    def head(self, path: Path, *handlers: Any) -> Callable[[Any], Any] | None:
        return self.route("HEAD", path, *handlers)

    def options(self, path: Path, *handlers: Any) -> Callable[[Any], Any] | None:
        return self.route("OPTIONS", path, *handlers)

    def all(self, path: Path, *handlers: Any) -> Callable[[Any], Any] | None:
        """Register handlers at *path* for every method."""
        return self.route(None, path, *handlers)

    def use(self, *handlers: Any) -> Callable[[Any], Any] | None:
        """Mount handlers so they are considered for every request.

        Accepts error handlers too (see ``errorhandler``)::

            app.use(log_requests)

            @app.use()
            @errorhandler
            def on_error(error, request, response, next):
                response.write_head(500)
                response.end(str(error))
        """
        if handlers:
            self._registry.mount(*handlers)
            return None

        def decorator(func: Any) -> Any:
            self._registry.mount(func)
            return func

        return decorator

    # -- Serving --

    def handle(self, request: Request, response: ResponseWriter) -> None:
        """Dispatch one request against the current registry snapshot."""
        dispatch(request, response, self._registry.entries, responder=respond)

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start the server.

        Development mode (``debug=True``) runs a single worker with
        auto-reload; otherwise ``config.workers`` workers are started.

        Args:
            host: Override bind host.
            port: Override bind port.
        """
        from wren.server.dev import run_server

        run_server(
            self,
            host or self.config.host,
            port or self.config.port,
            reload=self.config.debug,
            workers=self.config.workers,
            reload_include=self.config.reload_include,
            reload_dirs=self.config.reload_dirs,
        )

    def listen(self, port: int | None = None) -> None:
        """Start the server on *port* (default: ``config.port``)."""
        self.run(port=port)

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(scope, receive, send, app=self)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Acknowledge the ASGI lifespan protocol. Wren has no startup work."""
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
