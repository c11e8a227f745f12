"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    def mw(request: Request, response: ResponseWriter, next: Next) -> None

Built-in middleware:
    CORSMiddleware -- Cross-Origin Resource Sharing headers
"""

from wren.middleware.cors import CORSConfig, CORSMiddleware, cors
from wren.middleware.protocol import Middleware
from wren.routing.dispatch import Next

__all__ = [
    "CORSConfig",
    "CORSMiddleware",
    "Middleware",
    "Next",
    "cors",
]
