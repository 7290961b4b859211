"""Change dispatch: encode first, then relay.

Both behaviors subscribe to the same change event. The encoder must
finish rewriting addresses before the relay activates anything, so a
navigation always carries the new value. ``ChangeDispatcher`` owns that
order instead of leaving it to listener registration.
"""

import logging
from dataclasses import dataclass

from bs4 import Tag

from wren.frames.config import FALLBACK_ATTR, GROUP_ATTR, TriggerGroup
from wren.frames.document import ChangeEvent, select_all
from wren.frames.encoder import EmptyNamePolicy, ScopedQueryEncoder
from wren.frames.relay import Activate, TriggerRelay

logger = logging.getLogger("wren.frames")


@dataclass(frozen=True, slots=True, eq=False)
class Dispatch:
    """What one change event did inside one group."""

    event: ChangeEvent
    addresses: tuple[str, ...] = ()
    activated: tuple[Tag, ...] = ()


class ChangeDispatcher:
    """Runs the encoder then the relay for one trigger group."""

    __slots__ = ("encoder", "group", "relay")

    def __init__(
        self,
        group: TriggerGroup,
        activate: Activate,
        *,
        empty_name: EmptyNamePolicy = EmptyNamePolicy.SKIP,
    ) -> None:
        self.group = group
        self.encoder = ScopedQueryEncoder(group, empty_name=empty_name)
        self.relay = TriggerRelay(group, activate)

    def matches(self, control: Tag) -> bool:
        """True when *control* is a source of this group."""
        return self.group.contains(control) and self.group.is_source(control)

    def dispatch(self, event: ChangeEvent) -> Dispatch:
        if not self.matches(event.source):
            return Dispatch(event)
        addresses = self.encoder.on_field_changed(event)
        activated = self.relay.on_source_changed(event)
        logger.debug(
            "Group %r: %s=%r -> %d address(es), %d activation(s)",
            self.group.name,
            event.name,
            event.value,
            len(addresses),
            len(activated),
        )
        return Dispatch(event, addresses, activated)


def attach(
    document: Tag,
    activate: Activate,
    *,
    empty_name: EmptyNamePolicy = EmptyNamePolicy.SKIP,
) -> tuple[ChangeDispatcher, ...]:
    """Build one dispatcher per ``[data-trigger-group]`` container.

    Each container gets its own encoder and relay; nothing is shared
    between groups.
    """
    return tuple(
        ChangeDispatcher(TriggerGroup.from_container(container), activate, empty_name=empty_name)
        for container in select_all(document, f"[{GROUP_ATTR}]")
    )


def hide_fallbacks(document: Tag) -> tuple[Tag, ...]:
    """Hide no-script controls once behaviors are attached."""
    fallbacks = select_all(document, f"[{FALLBACK_ATTR}]")
    for element in fallbacks:
        element["hidden"] = ""
    return fallbacks
