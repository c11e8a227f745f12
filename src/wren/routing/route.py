"""Route entries and tagged handler variants."""

from dataclasses import dataclass
from typing import TypeAlias

from wren._internal.types import ErrorHandlerFunc, HandlerFunc
from wren.errors import ConfigurationError
from wren.routing.matcher import PathMatcher


@dataclass(frozen=True, slots=True)
class Normal:
    """A request handler: ``fn(request, response, next)``.

    Runs only while no error is in flight.
    """

    fn: HandlerFunc


@dataclass(frozen=True, slots=True)
class ErrorHandling:
    """An error handler: ``fn(error, request, response, next)``.

    Runs only while an error is in flight.
    """

    fn: ErrorHandlerFunc


Handler: TypeAlias = Normal | ErrorHandling


def errorhandler(fn: ErrorHandlerFunc) -> ErrorHandling:
    """Tag *fn* as an error handler.

    Usage::

        @errorhandler
        def on_error(error, request, response, next):
            response.write_head(500)
            response.end(str(error))

        app.use(on_error)
    """
    return ErrorHandling(fn)


def as_handler(value: object) -> Handler:
    """Normalize a registration argument to a tagged handler.

    Already-tagged values pass through; any other callable is ``Normal``.
    """
    if isinstance(value, (Normal, ErrorHandling)):
        return value
    if not callable(value):
        msg = f"Handler must be callable, got {type(value).__name__}"
        raise ConfigurationError(msg)
    return Normal(value)


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """One method/path/handler binding.

    Entries registered by the same call share a ``group_id``.
    ``method=None`` matches any method.
    """

    group_id: int
    method: str | None
    matcher: PathMatcher
    handler: Handler
