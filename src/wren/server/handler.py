"""ASGI request handling.

The one place raw ASGI is translated: the scope becomes a ``Request``,
the middleware chain runs around route dispatch, whatever the handler
returned is negotiated into a ``Response``, and errors of any kind
become error responses before anything is sent.
"""

import inspect
from collections.abc import Callable, Sequence
from dataclasses import replace
from typing import Any

from kida import Environment

from wren._internal.invoke import invoke
from wren._internal.types import ErrorHandler, Receive, Scope, Send
from wren.context import request_var
from wren.errors import HTTPError
from wren.http.request import Request
from wren.http.response import Response
from wren.middleware.protocol import Next
from wren.routing.params import convert_param
from wren.routing.route import RouteMatch
from wren.routing.router import Router
from wren.server.errors import handle_http_error, handle_internal_error
from wren.server.negotiation import negotiate
from wren.server.sender import send_response


def compose(middleware: Sequence[Callable[..., Any]], endpoint: Next) -> Next:
    """Wrap *endpoint* so ``middleware[0]`` runs first."""
    chain = endpoint
    for mw in reversed(middleware):

        async def link(request: Request, _mw: Any = mw, _next: Next = chain) -> Response:
            return await _mw(request, _next)

        chain = link
    return chain


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    middleware: tuple[Callable[..., Any], ...],
    error_handlers: dict[int | type, ErrorHandler],
    kida_env: Environment | None = None,
    debug: bool,
    max_content_length: int | None = None,
) -> None:
    if scope["type"] != "http":
        return

    async def endpoint(request: Request) -> Response:
        length = request.content_length
        if max_content_length is not None and length is not None and length > max_content_length:
            raise HTTPError(413, "Request body too large")
        match = router.match(request.method, request.path)
        return await _call_route(match, request, kida_env)

    request = Request.from_asgi(scope, receive)
    token = request_var.set(request)
    try:
        response = await compose(middleware, endpoint)(request)
    except HTTPError as exc:
        response = await handle_http_error(exc, request, error_handlers, kida_env, debug)
    except Exception as exc:
        response = await handle_internal_error(exc, request, error_handlers, kida_env, debug)
    finally:
        request_var.reset(token)

    await send_response(response, send)


async def _call_route(match: RouteMatch, request: Request, kida_env: Environment | None) -> Response:
    # replace() keeps _cache, so a body already read by middleware survives
    request = replace(request, path_params=match.path_params)
    params = {
        name: convert_param(match.path_params[name], param_type)
        for name, param_type in match.route.param_types
    }
    result = await invoke(match.route.handler, **handler_kwargs(match.route.handler, request, params))
    return negotiate(result, kida_env=kida_env, request=request)


def handler_kwargs(
    handler: Callable[..., Any],
    request: Request,
    params: dict[str, Any],
) -> dict[str, Any]:
    """Keyword arguments for *handler*, matched by parameter name.

    A parameter named ``request`` or annotated ``Request`` receives the
    request. Any other parameter named like a path parameter receives
    its converted value. Everything else is left to its default.
    """
    kwargs: dict[str, Any] = {}
    for name, param in inspect.signature(handler, eval_str=True).parameters.items():
        if name == "request" or param.annotation is Request:
            kwargs[name] = request
        elif name in params:
            kwargs[name] = params[name]
    return kwargs
