"""Element handles over the server-rendered document.

The frame behaviors only touch the document through these helpers:
selector lookups, reading and rewriting a target's address, and
resolving the region a target's navigation replaces. The document
model is a BeautifulSoup tree; the injected client snippet does the
same operations against the live DOM.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit, urlunsplit

from bs4 import Tag

from wren.http.query import encode_pair

# Attributes a target's address may live in, in lookup order.
ADDRESS_ATTRIBUTES = ("hx-get", "href", "formaction")


def select_all(container: Tag, selector: str) -> tuple[Tag, ...]:
    """Descendants of *container* matching *selector*, in document order."""
    return tuple(container.select(selector))


def address_of(element: Tag) -> str | None:
    """The element's navigation address, or None when it has none."""
    for name in ADDRESS_ATTRIBUTES:
        value = element.get(name)
        if value is not None:
            return str(value)
    return None


def replace_address_queries(element: Tag, name: str, value: str | None) -> str | None:
    """Replace the query of each address attribute the element carries.

    Every attribute keeps its own base path and fragment, so an ``href``
    and an ``hx-get`` that point at different paths stay different.
    Returns the rewritten primary address, or None when the element has
    no address.
    """
    for attribute in ADDRESS_ATTRIBUTES:
        if element.has_attr(attribute):
            element[attribute] = replace_query(str(element[attribute]), name, value)
    return address_of(element)


def region_of(element: Tag) -> str | None:
    """The id of the region a target's navigation replaces.

    ``hx-target="#id"`` wins over ``data-frame="id"``. Other htmx
    target expressions are not regions.
    """
    hx_target = element.get("hx-target")
    if hx_target:
        hx_target = str(hx_target)
        return hx_target[1:] if hx_target.startswith("#") else None
    frame = element.get("data-frame")
    return str(frame) if frame else None


def replace_query(url: str, name: str, value: str | None) -> str:
    """Replace the whole query of *url* with the single pair name=value.

    Scheme, host, path, and fragment are kept.

        >>> replace_query("/addresses/new?country=US", "country", "CA")
        '/addresses/new?country=CA'
    """
    parts = urlsplit(url)
    return urlunsplit(parts._replace(query=encode_pair(name, value)))


def control_value(control: Tag) -> str | None:
    """Current value of a form control as a browser would report it.

    A select reports its selected option, or its first option when none
    is marked. Unchecked checkboxes and radios report None.
    """
    match control.name:
        case "select":
            options = control.find_all("option")
            if not options:
                return None
            chosen = next((opt for opt in options if opt.has_attr("selected")), options[0])
            return option_value(chosen)
        case "textarea":
            return control.get_text()
        case "input":
            kind = str(control.get("type", "text")).lower()
            if kind in ("checkbox", "radio"):
                return str(control.get("value", "on")) if control.has_attr("checked") else None
            return str(control.get("value", ""))
        case _:
            value = control.get("value")
            return str(value) if value is not None else None


def option_value(option: Tag) -> str:
    value = option.get("value")
    return str(value) if value is not None else option.get_text(strip=True)


def form_fields(form: Tag) -> tuple[tuple[str, str], ...]:
    """Successful controls of *form* as (name, value) pairs.

    Buttons are excluded; the submitter adds its own pair.
    """
    pairs: list[tuple[str, str]] = []
    for control in form.find_all(["input", "select", "textarea"]):
        name = control.get("name")
        if not name or control.has_attr("disabled"):
            continue
        if control.name == "input" and str(control.get("type", "")).lower() in (
            "submit",
            "button",
            "reset",
            "image",
        ):
            continue
        value = control_value(control)
        if value is not None:
            pairs.append((str(name), value))
    return tuple(pairs)


@dataclass(frozen=True, slots=True, eq=False)
class ChangeEvent:
    """A value change on a form control.

    *name* is the control's ``name`` attribute (empty when it has none);
    *value* may be None for a control without a current value.
    """

    source: Tag
    name: str
    value: str | None

    @classmethod
    def from_control(cls, control: Tag) -> ChangeEvent:
        return cls(
            source=control,
            name=str(control.get("name") or ""),
            value=control_value(control),
        )
