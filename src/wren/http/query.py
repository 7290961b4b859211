"""Query strings: parsed parameters and the encoding contract.

``QueryParams`` is what handlers read. ``encode_pair`` and
``encode_fields`` are what the frame behaviors and the headless
browser write. Both directions use RFC 3986 percent-encoding
(``quote(..., safe="")``): a space becomes ``%20``, never ``+``, and
``&``, ``=``, ``+``, ``#``, ``/`` and ``%`` are always escaped, so any
string survives an encode/parse round trip unchanged.
"""

from collections.abc import Iterable
from urllib.parse import parse_qsl, quote

from wren.http.multidict import MultiDict


def encode_pair(name: str, value: str | None) -> str:
    """Encode one ``name=value`` pair.

    ``None`` (an absent value, e.g. a select with no options) encodes
    the same as an empty string: ``name=``.
    """
    return f"{quote(name, safe='')}={quote(value or '', safe='')}"


def encode_fields(fields: Iterable[tuple[str, str]]) -> str:
    """Encode an ordered sequence of pairs, duplicates preserved."""
    return "&".join(encode_pair(name, value) for name, value in fields)


class QueryParams(MultiDict):
    """Immutable query string parameters, parsed from raw bytes.

    Blank values are kept: ``?country=`` means the field was sent empty,
    which is different from not being sent at all.
    """

    __slots__ = ("_raw",)

    _raw: bytes

    def __init__(self, query_string: bytes = b"") -> None:
        super().__init__(parse_qsl(query_string.decode("latin-1"), keep_blank_values=True))
        object.__setattr__(self, "_raw", query_string)

    @property
    def raw(self) -> str:
        """The query string as received, without the ``?``."""
        return self._raw.decode("latin-1")
