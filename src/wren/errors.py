"""Wren exception hierarchy.

Shared across the registry, dispatcher, response writer, and adapter so
every module raises and catches the same types.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when app configuration or registration input is invalid."""


class ResponseError(WrenError):
    """Raised when a response is written in an invalid order."""


class HeadersAlreadySent(ResponseError):  # noqa: N818
    """The status line and headers have already been emitted.

    Raised by ``set_header()``, ``remove_header()`` and ``write_head()``
    once the head of the response is on the wire.
    """

    def __init__(self, action: str = "modify headers") -> None:
        super().__init__(f"Cannot {action} after headers have been sent.")


class ResponseFinished(ResponseError):  # noqa: N818
    """The response body has already been ended."""

    def __init__(self) -> None:
        super().__init__("Cannot write to a response after end().")
