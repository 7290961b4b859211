"""Template, Fragment, Page, and ValidationError return types.

Frozen dataclasses that handlers return. The content negotiation layer
inspects these to dispatch to the kida renderer.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Template:
    """Render a full kida template.

    Usage::

        return Template("addresses/show.html", address=address)
    """

    name: str
    context: dict[str, Any] = field(default_factory=dict)

    def __init__(self, name: str, /, **context: Any) -> None:
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "context", context)


@dataclass(frozen=True, slots=True)
class Fragment:
    """Render a named block from a kida template.

    Usage::

        return Fragment("addresses/new.html", "state_field", states=states)
    """

    template_name: str
    block_name: str
    context: dict[str, Any] = field(default_factory=dict)

    def __init__(self, template_name: str, block_name: str, /, **context: Any) -> None:
        object.__setattr__(self, "template_name", template_name)
        object.__setattr__(self, "block_name", block_name)
        object.__setattr__(self, "context", context)


@dataclass(frozen=True, slots=True)
class Page:
    """Render a full template or a named block, depending on the request.

    The negotiation layer renders:

    * the **full template** for ordinary navigations, the no-script
      fallback submission, and history-restore requests;
    * the **named block only** for region-scoped requests
      (``HX-Request`` without ``HX-History-Restore-Request``).

    One handler therefore serves both halves of a progressively
    enhanced form. When *region_blocks* maps an ``HX-Target`` id to a
    block name, that block is rendered instead of *block_name*.

    Usage::

        return Page("addresses/new.html", "address_form",
                    region_blocks={"address_state": "state_field"},
                    form=form, states=states)
    """

    name: str
    block_name: str
    region_blocks: dict[str, str] = field(default_factory=dict)
    context: dict[str, Any] = field(default_factory=dict)

    def __init__(
        self,
        name: str,
        block_name: str,
        /,
        *,
        region_blocks: dict[str, str] | None = None,
        **context: Any,
    ) -> None:
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "block_name", block_name)
        object.__setattr__(self, "region_blocks", region_blocks or {})
        object.__setattr__(self, "context", context)

    def block_for(self, target: str | None) -> str:
        """Block to render for a fragment request aimed at *target*."""
        if target is not None:
            return self.region_blocks.get(target.lstrip("#"), self.block_name)
        return self.block_name


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Return a form fragment with 422 status.

    Bundles the common pattern: validate server-side, re-render the
    form fragment with errors on failure, return 422. If *retarget* is
    set, the ``HX-Retarget`` response header is added.

    Usage::

        result = validate(form, rules)
        if not result:
            return ValidationError("addresses/new.html", "address_form",
                                   errors=result.errors, form=form)
    """

    template_name: str
    block_name: str
    retarget: str | None = None
    context: dict[str, Any] = field(default_factory=dict)

    def __init__(
        self,
        template_name: str,
        block_name: str,
        /,
        *,
        retarget: str | None = None,
        **context: Any,
    ) -> None:
        object.__setattr__(self, "template_name", template_name)
        object.__setattr__(self, "block_name", block_name)
        object.__setattr__(self, "retarget", retarget)
        object.__setattr__(self, "context", context)
