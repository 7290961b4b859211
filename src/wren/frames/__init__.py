"""Frame behaviors: dependent controls over server-rendered regions.

A ``[data-trigger-group]`` container holds a source control and one or
more navigation targets. When the source changes, the
``ScopedQueryEncoder`` rewrites each target's query to the changed
``name=value`` pair and the ``TriggerRelay`` then activates each
target, so the host reloads only the region the target names.
"""

from wren.frames.config import TriggerGroup
from wren.frames.dispatch import ChangeDispatcher, Dispatch, attach, hide_fallbacks
from wren.frames.document import ChangeEvent, replace_query
from wren.frames.encoder import EmptyNamePolicy, ScopedQueryEncoder
from wren.frames.relay import TriggerRelay

__all__ = [
    "ChangeDispatcher",
    "ChangeEvent",
    "Dispatch",
    "EmptyNamePolicy",
    "ScopedQueryEncoder",
    "TriggerGroup",
    "TriggerRelay",
    "attach",
    "hide_fallbacks",
    "replace_query",
]
