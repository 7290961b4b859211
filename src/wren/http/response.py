"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response. Immutable by convention,
built incrementally by design.
"""

from __future__ import annotations

import json as json_module
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Literal

type RenderIntent = Literal["full_page", "fragment", "unknown"]


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Construct with a body, then chain ``.with_*()`` calls to set
    status and headers. Each call returns a new ``Response``.

    ``render_intent`` records whether the body is a full document or
    a region fragment, so injection middleware never touches fragments.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()
    render_intent: RenderIntent = "unknown"

    # -- Chainable transformations --

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Return a new Response with additional headers."""
        new = tuple(headers.items())
        return replace(self, headers=(*self.headers, *new))

    def with_render_intent(self, intent: RenderIntent) -> Response:
        """Return a new Response marked as a full page or a fragment."""
        return replace(self, render_intent=intent)

    # -- htmx response headers --

    def with_hx_retarget(self, selector: str) -> Response:
        """Override the region this response is swapped into."""
        return self.with_header("HX-Retarget", selector)

    def with_hx_reswap(self, strategy: str) -> Response:
        """Override the swap strategy (``innerHTML``, ``outerHTML``, ...)."""
        return self.with_header("HX-Reswap", strategy)

    def with_hx_trigger(self, event: str | dict[str, Any]) -> Response:
        """Trigger a client-side event after the response is received.

        Accepts a plain event name or a dict for events with payloads::

            .with_hx_trigger("addressSaved")
            .with_hx_trigger({"showToast": {"message": "Saved!"}})
        """
        value = event if isinstance(event, str) else json_module.dumps(event)
        return self.with_header("HX-Trigger", value)

    # -- Body helpers --

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the first header value for *name* (case-insensitive)."""
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return default


@dataclass(frozen=True, slots=True)
class Redirect:
    """A redirect response.

    Defaults to ``303 See Other`` so a POST is always followed by a GET.
    """

    url: str
    status: int = 303
    headers: tuple[tuple[str, str], ...] = ()
