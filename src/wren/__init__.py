"""Wren — a small request-dispatch engine for ASGI.

Routes and middleware go into one ordered list; each request walks that
list, and handlers pass control along with ``next``.

Basic usage::

    from wren import App

    app = App()

    @app.get("/")
    def index(request, response, next):
        response.end("Hello World!")

    app.listen(3000)

Error handlers are tagged explicitly::

    from wren import errorhandler

    @app.use()
    @errorhandler
    def on_error(error, request, response, next):
        response.write_head(500)
        response.end(str(error))
"""

import importlib

__version__ = "0.1.0"

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "App": "wren.app",
    "AppConfig": "wren.config",
    "CORSConfig": "wren.middleware.cors",
    "CORSMiddleware": "wren.middleware.cors",
    "ConfigurationError": "wren.errors",
    "ErrorHandling": "wren.routing.route",
    "HeadersAlreadySent": "wren.errors",
    "Middleware": "wren.middleware.protocol",
    "Next": "wren.routing.dispatch",
    "Normal": "wren.routing.route",
    "Request": "wren.http.request",
    "ResponseFinished": "wren.errors",
    "ResponseWriter": "wren.http.response",
    "WrenError": "wren.errors",
    "cors": "wren.middleware.cors",
    "errorhandler": "wren.routing.route",
}

__all__ = sorted(_LAZY_IMPORTS)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_path), name)
