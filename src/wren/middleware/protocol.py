"""Middleware protocol.

A middleware is any callable matching::

    def my_mw(request: Request, response: ResponseWriter, next: Next) -> None: ...

No base class required. Plain functions and callable objects both work;
they are registered as ``Normal`` handlers.
"""

from typing import Protocol

from wren.http.request import Request
from wren.http.response import ResponseWriter
from wren.routing.dispatch import Next


class Middleware(Protocol):
    """Protocol for wren middleware.

    Accepts both functions and callable objects::

        # Function middleware
        def log_requests(request: Request, response: ResponseWriter, next: Next) -> None:
            logger.info("%s %s", request.method, request.url)
            next()

        # Class middleware
        class PoweredBy:
            def __call__(self, request, response, next) -> None:
                response.set_header("X-Powered-By", "wren")
                next()
    """

    def __call__(self, request: Request, response: ResponseWriter, next: Next) -> None: ...
