"""HTML injection middleware.

Injects a snippet (e.g. the frame-controls ``<script>``) into
``text/html`` page responses before a target string (default
``</body>``). Region fragments are never touched: a script injected
into a swapped region would run again on every swap.
"""

from dataclasses import replace

from wren.http.request import Request
from wren.http.response import Response
from wren.middleware.protocol import Next


class HTMLInject:
    """Middleware that injects HTML content into full-page responses.

    When *full_page_only* is ``True``, the snippet is injected only
    when the *before* target string is found in the body. Otherwise it
    is appended at the end when the target is absent.

    Usage::

        app.add_middleware(HTMLInject(
            '<script src="/static/analytics.js"></script>',
            before="</body>",
        ))
    """

    __slots__ = ("_full_page_only", "_snippet", "_target")

    def __init__(
        self,
        snippet: str,
        *,
        before: str = "</body>",
        full_page_only: bool = False,
    ) -> None:
        self._snippet = snippet
        self._target = before
        self._full_page_only = full_page_only

    async def __call__(self, request: Request, next: Next) -> Response:
        response = await next(request)

        if "text/html" not in response.content_type:
            return response
        if response.render_intent == "fragment":
            return response
        if response.render_intent == "unknown" and request.is_fragment:
            return response

        body = response.text
        if self._target in body:
            body = body.replace(self._target, self._snippet + self._target, 1)
        elif self._full_page_only:
            return response
        else:
            body = body + self._snippet

        return replace(response, body=body)
