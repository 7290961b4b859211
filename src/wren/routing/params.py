"""Path parameter converters for route segments like ``{address_id:int}``."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Converter:
    """How a path segment is matched, and what the handler receives."""

    regex: str
    convert: Callable[[str], Any]


CONVERTERS: dict[str, Converter] = {
    "str": Converter(r"[^/]+", str),
    "int": Converter(r"\d+", int),
    "path": Converter(r".+", str),
}


def convert_param(value: str, param_type: str) -> Any:
    """Convert a captured segment with the converter named *param_type*.

    Raises ``KeyError`` for an unknown converter and ``ValueError`` when
    *value* does not convert.
    """
    return CONVERTERS[param_type].convert(value)
