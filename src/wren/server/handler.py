"""ASGI handler — translates ASGI scope/messages to wren types.

The only component that touches raw ASGI directly. Reads the request
body, builds a ``Request``, and runs the synchronous dispatcher in a
worker thread. Response writes are marshalled back onto the event loop
through a blocking portal, so a handler may also finish its response
from any other thread.
"""

import logging
from typing import TYPE_CHECKING

import anyio
import anyio.to_thread
from anyio.from_thread import BlockingPortal

from wren._internal.asgi import Message, Receive, Scope, Send
from wren.http.request import Request
from wren.http.response import ResponseWriter

if TYPE_CHECKING:
    from wren.app import App

logger = logging.getLogger("wren.server")


async def read_body(receive: Receive) -> bytes:
    """Drain the request body from ASGI ``receive``."""
    chunks: list[bytes] = []
    while True:
        message = await receive()
        if message["type"] == "http.disconnect":
            break
        body = message.get("body", b"")
        if body:
            chunks.append(body)
        if not message.get("more_body", False):
            break
    return b"".join(chunks)


async def handle_request(scope: Scope, receive: Receive, send: Send, *, app: "App") -> None:
    """Process a single HTTP request through the dispatcher."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, await read_body(receive))
    finished = anyio.Event()

    async with BlockingPortal() as portal:

        def transmit(message: Message) -> None:
            portal.call(send, message)
            if message["type"] == "http.response.body" and not message.get("more_body", False):
                portal.call(finished.set)

        response = ResponseWriter(transmit)
        try:
            await anyio.to_thread.run_sync(app.handle, request, response)
        except Exception:
            logger.exception("dispatch failed for %s %s", request.method, request.url)
            raise

        # A handler that kept the response may end it after returning.
        await finished.wait()
