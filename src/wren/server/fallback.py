"""Default responder — the last stop when no handler finishes a response.

Runs after the dispatcher has walked every entry. It must not raise: if
a handler already sent the head, the only safe move is to close the body.
"""

import logging
from typing import Any

from wren.http.request import Request
from wren.http.response import ResponseWriter

logger = logging.getLogger("wren.server")

NOT_FOUND_BODY = "Not Found"
INTERNAL_ERROR_BODY = "Internal Server Error"


def respond(error: Any, request: Request, response: ResponseWriter) -> None:
    """Finish *response* with a fixed 404 or 500, or just end it."""
    if response.headers_sent:
        if error is not None:
            logger.error(
                "unhandled error after headers were sent on %s %s",
                request.method,
                request.url,
                exc_info=error if isinstance(error, BaseException) else None,
            )
        response.end()
        return

    if error is not None:
        logger.error(
            "500 %s %s: %r",
            request.method,
            request.url,
            error,
            exc_info=error if isinstance(error, BaseException) else None,
        )
        _send_plain(response, 500, INTERNAL_ERROR_BODY)
        return

    logger.debug("404 %s %s", request.method, request.url)
    _send_plain(response, 404, NOT_FOUND_BODY)


def _send_plain(response: ResponseWriter, status: int, body: str) -> None:
    response.status_code = status
    response.set_header("Content-Type", "text/plain; charset=utf-8")
    response.remove_header("Content-Length")
    response.end(body)
