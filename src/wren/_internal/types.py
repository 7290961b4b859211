"""Type aliases shared across wren modules.

Only the server handler, the request factory, and the test client
touch the raw ASGI shapes; handlers see ``Request`` and ``Response``.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any

type Scope = MutableMapping[str, Any]
type Message = MutableMapping[str, Any]
type Receive = Callable[[], Awaitable[Message]]
type Send = Callable[[Message], Awaitable[None]]

# User functions with free-form signatures, resolved by inspection
type Handler = Callable[..., Any]
type ErrorHandler = Callable[..., Any]
