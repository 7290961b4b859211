"""Form bodies and binding them onto records.

``FormData`` has the same interface as ``QueryParams``, so a handler
reads a GET submission (every field in the query string) and a POST
submission (every field in the body) the same way.

``form_from()`` binds either onto a frozen dataclass, which is how the
no-script fallback path and the enhanced path end up populating the
same record type.
"""

from collections.abc import Mapping
from dataclasses import MISSING
from dataclasses import fields as dc_fields
from typing import Any
from urllib.parse import parse_qsl

from wren.http.multidict import MultiDict

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class FormData(MultiDict):
    """Immutable parsed form data.

    Usage::

        form = await request.form()
        city = form["city"]
    """

    __slots__ = ()


def parse_form_data(body: bytes, content_type: str) -> FormData:
    """Parse an urlencoded form body.

    Raises:
        ValueError: If *content_type* is not
            ``application/x-www-form-urlencoded``.
    """
    media_type = content_type.lower().split(";")[0].strip()
    if media_type != FORM_CONTENT_TYPE:
        msg = f"Unsupported form content type: {content_type!r}"
        raise ValueError(msg)
    return FormData(parse_qsl(body.decode("utf-8"), keep_blank_values=True))


def form_from[T](data: Mapping[str, str], datacls: type[T]) -> T:
    """Bind a mapping of string fields onto a dataclass.

    Missing fields fall back to the dataclass default, so a partial
    submission (the enhanced path sends only the changed field) binds
    just as well as a full one (the no-script path sends every field).
    Present values are stripped of surrounding whitespace.

    Fields without a default that are absent from *data* bind to ``""``;
    presence is checked by validation, not here.
    """
    values: dict[str, Any] = {}
    for f in dc_fields(datacls):  # type: ignore[arg-type]
        raw = data.get(f.name)
        if raw is not None:
            values[f.name] = raw.strip()
        elif f.default is not MISSING:
            values[f.name] = f.default
        else:
            values[f.name] = ""
    return datacls(**values)


def form_values(form: Any) -> dict[str, str]:
    """Field values as strings, for re-populating a template.

    Accepts a dataclass instance or a ``Mapping``.
    """
    if hasattr(form, "__dataclass_fields__"):
        return {
            f.name: "" if value is None else str(value)
            for f in dc_fields(form)
            for value in (getattr(form, f.name),)
        }
    if isinstance(form, Mapping):
        return {k: str(v) for k, v in form.items()}
    return {}
