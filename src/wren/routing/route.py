"""Route and RouteMatch frozen dataclasses."""

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Created during app setup, compiled into the router at freeze time.
    ``pattern`` and ``param_types`` are filled in by ``Router.add``.
    """

    path: str
    handler: Callable[..., Any]
    methods: frozenset[str]
    name: str | None = None
    pattern: re.Pattern[str] | None = field(default=None, compare=False)
    param_types: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    path_params: dict[str, str]
