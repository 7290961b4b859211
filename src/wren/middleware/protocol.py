"""The middleware shape.

A middleware is any callable of the form::

    async def mw(request: Request, next: Next) -> Response: ...

Functions and objects with ``__call__`` both qualify; nothing is
subclassed. ``App`` composes them outermost-first in registration
order, with the frame-controls injector innermost.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from wren.http.request import Request
from wren.http.response import Response

# The rest of the chain, ending at the route handler
type Next = Callable[[Request], Awaitable[Response]]


class Middleware(Protocol):
    """Protocol for wren middleware.

    Example: tag region responses so a proxy can cache them apart::

        async def vary_on_htmx(request: Request, next: Next) -> Response:
            response = await next(request)
            return response.with_header("Vary", "HX-Request")
    """

    async def __call__(self, request: Request, next: Next) -> Response: ...
