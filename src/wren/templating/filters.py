"""Built-in wren template filters and globals.

Registered automatically on every wren kida Environment. The globals
emit the declarative ``data-trigger-*`` attributes that the frame
behaviors (Python and JavaScript alike) attach to.
"""

import html
from typing import Any

from kida.template import Markup

from wren.frames.config import (
    FALLBACK_ATTR,
    GROUP_ATTR,
    SOURCE_ATTR,
    TARGET_ATTR,
)


def attr(value: Any, name: str) -> str | Markup:
    """Output an HTML attribute when value is truthy, else empty string.

    Example:
        <input name="city"{{ placeholder | attr("placeholder") }}>
    """
    if not value:
        return ""
    return Markup(f' {name}="{html.escape(str(value))}"')


def field_errors(errors: Any, field_name: str) -> list[str]:
    """Extract validation errors for a single form field.

    Returns an empty list when *errors* is None, missing, or the field
    has no errors.

    Example:
        {% for msg in errors | field_errors("city") %}
          <p role="alert">City {{ msg }}</p>
        {% end %}
    """
    if errors is None:
        return []
    if isinstance(errors, dict):
        val = errors.get(field_name, [])
        return list(val) if val else []
    return []


def selected(value: Any, current: Any) -> str | Markup:
    """Output `` selected`` when *value* equals the current selection.

    Example:
        <option value="{{ c.code }}"{{ c.code | selected(form.country) }}>
    """
    if current is None or str(value) != str(current):
        return ""
    return Markup(" selected")


# -- Frame behavior attributes --


def trigger_group_attrs(
    name: str = "",
    *,
    sources: str | None = None,
    targets: str | None = None,
) -> Markup:
    """Mark an element as a trigger-group container.

    *sources* and *targets* override the default selectors::

        <form{{ trigger_group_attrs("address") }}>
    """
    parts = [f' {GROUP_ATTR}="{html.escape(name, quote=True)}"']
    if sources:
        parts.append(f' data-trigger-sources="{html.escape(sources, quote=True)}"')
    if targets:
        parts.append(f' data-trigger-targets="{html.escape(targets, quote=True)}"')
    return Markup("".join(parts))


def trigger_source_attrs() -> Markup:
    """Mark a control as the group's source."""
    return Markup(f" {SOURCE_ATTR}")


def trigger_target_attrs(href: str, region: str | None = None, *, swap: str = "") -> Markup:
    """Build a hidden navigation target scoped to *region*.

    The element carries its address twice: ``href`` for the headless
    host and plain links, ``hx-get`` for htmx. Both are rewritten by
    the query encoder.
    """
    url = html.escape(href, quote=True)
    parts = [f" {TARGET_ATTR} hidden", f' href="{url}"', f' hx-get="{url}"']
    if region:
        parts.append(f' hx-target="#{html.escape(region, quote=True)}"')
    if swap:
        parts.append(f' hx-swap="{html.escape(swap, quote=True)}"')
    return Markup("".join(parts))


def trigger_fallback_attrs() -> Markup:
    """Mark a no-script control; it is hidden once behaviors attach."""
    return Markup(f" {FALLBACK_ATTR}")


BUILTIN_GLOBALS: dict[str, Any] = {
    "trigger_fallback_attrs": trigger_fallback_attrs,
    "trigger_group_attrs": trigger_group_attrs,
    "trigger_source_attrs": trigger_source_attrs,
    "trigger_target_attrs": trigger_target_attrs,
}


# All built-in wren filters, registered automatically on every env.
BUILTIN_FILTERS: dict[str, Any] = {
    "attr": attr,
    "field_errors": field_errors,
    "selected": selected,
}
