"""Request headers, with the htmx request headers named once.

Header names are case-insensitive; they are stored lowercased and
decoded from the ASGI latin-1 byte pairs at construction.
"""

from __future__ import annotations

from collections.abc import Iterable

from wren.http.multidict import MultiDict

# Sent by htmx (and by the test client's ``fragment()``) on
# region-scoped requests.
HX_REQUEST = "hx-request"
HX_TARGET = "hx-target"
HX_TRIGGER = "hx-trigger"
HX_HISTORY_RESTORE = "hx-history-restore-request"


class Headers(MultiDict):
    """Immutable, case-insensitive HTTP headers."""

    __slots__ = ()

    @classmethod
    def from_asgi(cls, raw: Iterable[tuple[bytes, bytes]]) -> Headers:
        return cls((name.decode("latin-1"), value.decode("latin-1")) for name, value in raw)

    @staticmethod
    def _key(name: str) -> str:
        return name.lower()

    def flag(self, name: str) -> bool:
        """True when header *name* is the literal ``true`` htmx sends."""
        return self.get(name) == "true"
