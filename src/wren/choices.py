"""Reference data for dependent selects.

A ``ChoiceProvider`` answers one question: given a parent code (a
country), which ordered choices (its states) belong to it? An empty
tuple is a valid answer and means the dependent field has no options.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class Choice:
    """One ``<option>``: the submitted code and the displayed name."""

    code: str
    name: str


class ChoiceProvider(Protocol):
    """Two-level lookup: top-level choices and the children of each."""

    def roots(self) -> tuple[Choice, ...]: ...

    def children(self, parent: str) -> tuple[Choice, ...]: ...


class StaticChoices:
    """An in-memory ``ChoiceProvider``.

    Usage::

        regions = StaticChoices(
            [Choice("CA", "Canada"), Choice("US", "United States")],
            {"CA": [Choice("AB", "Alberta"), ...], "US": [...]},
        )
        regions.children("CA")[0].name  # "Alberta"
    """

    __slots__ = ("_children", "_roots")

    def __init__(
        self,
        roots: Iterable[Choice],
        children: Mapping[str, Iterable[Choice]] | None = None,
    ) -> None:
        self._roots = tuple(roots)
        self._children = {code: tuple(items) for code, items in (children or {}).items()}

    def roots(self) -> tuple[Choice, ...]:
        return self._roots

    def children(self, parent: str) -> tuple[Choice, ...]:
        return self._children.get(parent, ())

    def codes(self, parent: str | None = None) -> tuple[str, ...]:
        """Codes of the roots, or of *parent*'s children."""
        items = self._roots if parent is None else self.children(parent)
        return tuple(choice.code for choice in items)

    def name_of(self, code: str, parent: str | None = None) -> str | None:
        """Display name for *code*, or None when it is unknown."""
        items = self._roots if parent is None else self.children(parent)
        return next((choice.name for choice in items if choice.code == code), None)
