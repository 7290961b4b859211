"""Error handling pipeline for wren requests.

Maps HTTPError exceptions and unexpected failures to Response objects,
using registered error handlers or sensible defaults. Region-scoped
requests get a small fragment plus htmx headers that send it to a
dedicated ``#wren-error`` container instead of the region.
"""

import html
import inspect
import logging
from collections.abc import Callable
from typing import Any

from kida import Environment

from wren._internal.invoke import invoke
from wren.errors import HTTPError
from wren.http.request import Request
from wren.http.response import Response
from wren.server.negotiation import negotiate

logger = logging.getLogger("wren.server")


def default_fragment_error(status: int, detail: str) -> str:
    """Minimal HTML snippet for fragment error responses."""
    return f'<div class="wren-error" data-status="{status}">{html.escape(detail)}</div>'


def _with_htmx_error_headers(response: Response, request: Request) -> Response:
    """Add htmx error-handling headers when the request is a fragment.

    - ``HX-Retarget: #wren-error`` sends the content to the error container
    - ``HX-Reswap: innerHTML`` replaces rather than appends
    - ``HX-Trigger: wrenError`` fires a client-side event
    """
    if not request.is_fragment:
        return response
    return (
        response
        .with_hx_retarget("#wren-error")
        .with_hx_reswap("innerHTML")
        .with_hx_trigger("wrenError")
    )


async def call_error_handler(
    handler: Callable[..., Any],
    request: Request,
    exc: Exception,
    kida_env: Environment | None,
) -> Response:
    """Invoke a user-registered error handler.

    Error handlers may accept zero, one (request), or two (request, exc)
    arguments, and may be sync or async.
    """
    params = list(inspect.signature(handler).parameters.values())
    if len(params) >= 2:
        result = await invoke(handler, request, exc)
    elif len(params) == 1:
        result = await invoke(handler, request)
    else:
        result = await invoke(handler)
    return negotiate(result, kida_env=kida_env, request=request)


async def handle_http_error(
    exc: HTTPError,
    request: Request,
    error_handlers: dict[int | type, Callable[..., Any]],
    kida_env: Environment | None,
    debug: bool,
) -> Response:
    """Map an HTTPError to a Response using registered error handlers."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)

    handler = error_handlers.get(type(exc)) or error_handlers.get(exc.status)
    if handler is not None:
        response = await call_error_handler(handler, request, exc, kida_env)
        # Keep the exception's status unless the handler chose its own
        if response.status == 200:
            response = response.with_status(exc.status)
        return response

    detail = exc.detail or f"Error {exc.status}"
    if debug and exc.detail:
        detail = f"{exc.status}: {exc.detail}"

    body = default_fragment_error(exc.status, detail) if request.is_fragment else html.escape(detail)
    response = Response(body=body).with_status(exc.status)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return _with_htmx_error_headers(response, request)


async def handle_internal_error(
    exc: Exception,
    request: Request,
    error_handlers: dict[int | type, Callable[..., Any]],
    kida_env: Environment | None,
    debug: bool,
) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)

    handler = error_handlers.get(500) or error_handlers.get(type(exc))
    if handler is not None:
        return await call_error_handler(handler, request, exc, kida_env)

    detail = f"{type(exc).__name__}: {exc}" if debug else "Internal Server Error"
    if request.is_fragment:
        response = Response(body=default_fragment_error(500, detail), status=500)
        return _with_htmx_error_headers(response, request)
    return Response(body=html.escape(detail), status=500)
