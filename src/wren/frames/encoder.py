"""Scoped query encoder.

On a field change, rewrite the address of every target in the group so
its query string is exactly the changed field's ``name=value`` pair.
Whatever query the address held before is discarded.
"""

import logging
from enum import StrEnum

from wren.frames.config import TriggerGroup
from wren.frames.document import ChangeEvent, replace_address_queries

logger = logging.getLogger("wren.frames")


class EmptyNamePolicy(StrEnum):
    """What to do when the changed control has no ``name``."""

    SKIP = "skip"  # leave every address untouched
    ENCODE = "encode"  # write "=value"


class ScopedQueryEncoder:
    """Rewrites target addresses inside one trigger group.

    Stateless between events: the same event applied twice leaves the
    same addresses.
    """

    __slots__ = ("empty_name", "group")

    def __init__(self, group: TriggerGroup, *, empty_name: EmptyNamePolicy = EmptyNamePolicy.SKIP) -> None:
        self.group = group
        self.empty_name = empty_name

    def on_field_changed(self, event: ChangeEvent) -> tuple[str, ...]:
        """Encode *event* into every target's address.

        Returns the rewritten addresses in target document order.
        """
        if not event.name and self.empty_name is EmptyNamePolicy.SKIP:
            logger.debug("Group %r: change from unnamed control, addresses kept", self.group.name)
            return ()

        addresses: list[str] = []
        for target in self.group.select_targets():
            updated = replace_address_queries(target, event.name, event.value)
            if updated is None:
                logger.debug("Group %r: target <%s> has no address", self.group.name, target.name)
                continue
            addresses.append(updated)
        return tuple(addresses)
