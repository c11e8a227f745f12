"""Shared type aliases used across wren modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Normal handler: fn(request, response, next)
HandlerFunc: TypeAlias = Callable[[Any, Any, Any], Any]

# Error handler: fn(error, request, response, next)
ErrorHandlerFunc: TypeAlias = Callable[[Any, Any, Any, Any], Any]
