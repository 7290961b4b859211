"""Content negotiation: maps return values to Response objects.

Inspects the value a route handler returns and produces the matching
Response. isinstance-based dispatch, no magic, fully predictable.
"""

from __future__ import annotations

import json as json_module
from typing import TYPE_CHECKING, Any

from kida import Environment

from wren.errors import ConfigurationError
from wren.http.response import Redirect, RenderIntent, Response
from wren.templating.integration import render
from wren.templating.returns import Fragment, Page, Template, ValidationError

if TYPE_CHECKING:
    from wren.http.request import Request


def _html_response(body: str, *, intent: RenderIntent) -> Response:
    """Build a text/html response with explicit render intent."""
    return Response(body=body).with_render_intent(intent)


def _require_env(kida_env: Environment | None, kind: str) -> Environment:
    if kida_env is None:
        msg = (
            f"{kind} return type requires kida integration. "
            "Ensure a template_dir is configured in AppConfig."
        )
        raise ConfigurationError(msg)
    return kida_env


def negotiate(
    value: Any,
    *,
    kida_env: Environment | None = None,
    request: Request | None = None,
) -> Response:
    """Convert a route handler's return value to a Response.

    Dispatch order:

    1. ``Response``           -> pass through
    2. ``Redirect``           -> status + Location header
    3. ``Template``           -> full page
    4. ``Fragment``           -> named block
    5. ``Page``               -> full page, or the block for ``HX-Target``
                                 on region-scoped requests
    6. ``ValidationError``    -> block + 422 + optional HX-Retarget
    7. ``str``                -> 200, text/html
    8. ``dict`` / ``list``    -> 200, application/json
    9. ``(value, int)``       -> negotiate value, override status
    10. ``(value, int, dict)`` -> negotiate value, override status + headers
    """
    match value:
        case Response():
            return value
        case Redirect():
            return (
                Response(body="")
                .with_status(value.status)
                .with_header("Location", value.url)
                .with_headers(dict(value.headers))
            )
        case Template():
            env = _require_env(kida_env, "Template")
            return _html_response(render(env, value.name, value.context), intent="full_page")
        case Fragment():
            env = _require_env(kida_env, "Fragment")
            html = render(env, value.template_name, value.context, block=value.block_name)
            return _html_response(html, intent="fragment")
        case Page():
            env = _require_env(kida_env, "Page")
            if request is not None and request.is_fragment and not request.is_history_restore:
                block = value.block_for(request.htmx_target)
                html = render(env, value.name, value.context, block=block)
                return _html_response(html, intent="fragment")
            html = render(env, value.name, value.context)
            return _html_response(html, intent="full_page")
        case ValidationError():
            env = _require_env(kida_env, "ValidationError")
            html = render(env, value.template_name, value.context, block=value.block_name)
            response = _html_response(html, intent="fragment").with_status(422)
            if value.retarget is not None:
                response = response.with_hx_retarget(value.retarget)
            return response
        case str():
            return _html_response(value, intent="unknown")
        case dict() | list():
            return Response(
                body=json_module.dumps(value, default=str),
                content_type="application/json; charset=utf-8",
            )
        case (inner, int() as status):
            return negotiate(inner, kida_env=kida_env, request=request).with_status(status)
        case (inner, int() as status, dict() as headers):
            response = negotiate(inner, kida_env=kida_env, request=request)
            return response.with_status(status).with_headers(headers)
        case _:
            msg = (
                f"Cannot convert {type(value).__name__} to a response. "
                f"Return str, dict, list, Template, Fragment, Page, "
                f"ValidationError, Response, or Redirect."
            )
            raise TypeError(msg)
