"""ASGI type aliases.

Raw ASGI types used by the adapter and the response writer. Users never
see these; handlers work with ``Request`` and ``ResponseWriter``.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

# ASGI 3.0 callables and messages
Scope: TypeAlias = MutableMapping[str, Any]
Message: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[Message]]
Send: TypeAlias = Callable[[Message], Awaitable[None]]

# Synchronous sink the response writer emits messages through
Transmit: TypeAlias = Callable[[Message], None]
