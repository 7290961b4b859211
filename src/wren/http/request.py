"""Immutable HTTP request.

Metadata is frozen at creation. The body is read from ASGI at most
once, on first access, and cached with its parsed form.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from wren._internal.types import Receive, Scope
from wren.http.headers import HX_HISTORY_RESTORE, HX_REQUEST, HX_TARGET, Headers
from wren.http.query import QueryParams

if TYPE_CHECKING:
    from wren.http.forms import FormData


@dataclass(frozen=True, slots=True)
class Request:
    """An HTTP request as a handler sees it.

    ``is_fragment`` separates the two halves of a progressively
    enhanced form: region-scoped requests from the frame controls, and
    full-page loads from plain links or the no-script fallback.
    """

    method: str
    path: str
    headers: Headers
    query: QueryParams
    path_params: dict[str, str] = field(default_factory=dict)

    _receive: Receive | None = field(default=None, repr=False, compare=False)
    _cache: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_asgi(cls, scope: Scope, receive: Receive | None = None) -> Request:
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers.from_asgi(scope.get("headers", ())),
            query=QueryParams(scope.get("query_string", b"")),
            _receive=receive,
        )

    # -- htmx --

    @property
    def is_fragment(self) -> bool:
        """True for a region-scoped request (``HX-Request: true``)."""
        return self.headers.flag(HX_REQUEST)

    @property
    def is_history_restore(self) -> bool:
        """True for a back/forward cache miss, which needs the full page."""
        return self.headers.flag(HX_HISTORY_RESTORE)

    @property
    def htmx_target(self) -> str | None:
        """Id of the region being replaced."""
        return self.headers.get(HX_TARGET)

    # -- Entity --

    @property
    def content_type(self) -> str | None:
        return self.headers.get("content-type")

    @property
    def content_length(self) -> int | None:
        value = self.headers.get("content-length")
        if value is None or not value.isdigit():
            return None
        return int(value)

    @property
    def url(self) -> str:
        """Path plus query string, as requested."""
        return f"{self.path}?{self.query.raw}" if self.query.raw else self.path

    async def body(self) -> bytes:
        if "body" not in self._cache:
            chunks: list[bytes] = []
            more = self._receive is not None
            while more:
                assert self._receive is not None
                message = await self._receive()
                chunks.append(message.get("body", b""))
                more = message.get("more_body", False)
            self._cache["body"] = b"".join(chunks)
        return self._cache["body"]

    async def form(self) -> FormData:
        """The body parsed as urlencoded form data.

        Raises:
            ValueError: If the body has a non-form Content-Type.
        """
        if "form" not in self._cache:
            from wren.http.forms import FORM_CONTENT_TYPE, parse_form_data

            raw = await self.body()
            self._cache["form"] = parse_form_data(raw, self.content_type or FORM_CONTENT_TYPE)
        return self._cache["form"]
