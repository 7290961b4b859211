"""Trigger relay.

Turns a value change on a group's source control into an activation of
every navigation target in the group. The relay never navigates on its
own: it hands each target to the host's ``activate`` callable, which
performs the target's default action (follow a link, request a
fragment for a region, submit a form).
"""

import logging
from collections.abc import Callable

from bs4 import Tag

from wren.frames.config import TriggerGroup
from wren.frames.document import ChangeEvent

logger = logging.getLogger("wren.frames")

type Activate = Callable[[Tag], object]


class TriggerRelay:
    """Activates a group's targets when its source changes."""

    __slots__ = ("_activate", "group")

    def __init__(self, group: TriggerGroup, activate: Activate) -> None:
        self.group = group
        self._activate = activate

    def on_source_changed(self, event: ChangeEvent) -> tuple[Tag, ...]:
        """Activate each target once, in document order.

        Events from outside the container are ignored. Returns the
        targets that were activated.
        """
        if not self.group.contains(event.source):
            logger.debug("Group %r: ignoring change from outside the container", self.group.name)
            return ()
        targets = self.group.select_targets()
        if not targets:
            logger.debug("Group %r: no targets to activate", self.group.name)
        for target in targets:
            self._activate(target)
        return targets
