"""Trigger-group configuration.

A trigger group is the unit the frame behaviors work on: a scoping
container, the selector for its source control, and the selectors for
its navigation targets. Every behavior receives the same immutable
``TriggerGroup`` so they cannot disagree about scope.
"""

from __future__ import annotations

from dataclasses import dataclass

from bs4 import Tag

from wren.errors import ConfigurationError

GROUP_ATTR = "data-trigger-group"
SOURCE_ATTR = "data-trigger-source"
TARGET_ATTR = "data-trigger-target"
FALLBACK_ATTR = "data-trigger-fallback"
SOURCES_OVERRIDE_ATTR = "data-trigger-sources"
TARGETS_OVERRIDE_ATTR = "data-trigger-targets"

DEFAULT_SOURCE = f"[{SOURCE_ATTR}]"
DEFAULT_TARGETS = (f"[{TARGET_ATTR}]",)


@dataclass(frozen=True, slots=True, eq=False)
class TriggerGroup:
    """Scope and selectors shared by the relay and the query encoder.

    Selectors are evaluated against the container's descendants at
    event time, so elements swapped in after construction are found.
    """

    container: Tag
    source: str = DEFAULT_SOURCE
    targets: tuple[str, ...] = DEFAULT_TARGETS
    name: str = ""

    def __post_init__(self) -> None:
        if not self.source.strip():
            msg = f"Trigger group {self.name!r} has an empty source selector"
            raise ConfigurationError(msg)
        if any(not selector.strip() for selector in self.targets):
            msg = f"Trigger group {self.name!r} has an empty target selector"
            raise ConfigurationError(msg)

    @classmethod
    def from_container(cls, container: Tag) -> TriggerGroup:
        """Read a group from its container's ``data-trigger-*`` attributes."""
        source = container.get(SOURCES_OVERRIDE_ATTR) or DEFAULT_SOURCE
        raw_targets = container.get(TARGETS_OVERRIDE_ATTR)
        targets = (raw_targets,) if raw_targets else DEFAULT_TARGETS
        name = container.get(GROUP_ATTR) or ""
        return cls(container=container, source=str(source), targets=targets, name=str(name))

    def contains(self, element: Tag) -> bool:
        """True when *element* is a descendant of the container."""
        return any(parent is self.container for parent in element.parents)

    def owns(self, element: Tag) -> bool:
        """True when this container is *element*'s nearest group.

        Sources and targets inside a nested group belong to that group
        only. The container counts as a group even without the
        ``data-trigger-group`` attribute.
        """
        for parent in element.parents:
            if parent is self.container:
                return True
            if parent.has_attr(GROUP_ATTR):
                return False
        return False

    def select_sources(self) -> tuple[Tag, ...]:
        return tuple(el for el in self.container.select(self.source) if self.owns(el))

    def select_targets(self) -> tuple[Tag, ...]:
        """Owned targets in document order, each at most once."""
        if not self.targets:
            return ()
        return tuple(el for el in self.container.select(", ".join(self.targets)) if self.owns(el))

    def is_source(self, element: Tag) -> bool:
        return any(source is element for source in self.select_sources())
