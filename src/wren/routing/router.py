"""Compiled router with regex path matching.

Routes are registered during setup and compiled into an ordered,
immutable table when the app freezes. Static routes win over
parameterized ones registered for the same shape because they are
tried first.
"""

import re
from dataclasses import replace

from wren.errors import MethodNotAllowed, NotFound
from wren.routing.params import CONVERTERS
from wren.routing.route import Route, RouteMatch

_PARAM_RE = re.compile(r"\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::(?P<type>[a-z]+))?\}")


def compile_path(path: str) -> tuple[re.Pattern[str], tuple[tuple[str, str], ...]]:
    """Compile a route path into a regex and its declared parameter types.

    Examples::

        "/addresses"          -> ^/addresses$
        "/addresses/{id:int}" -> ^/addresses/(?P<id>\\d+)$
    """
    params: list[tuple[str, str]] = []
    pattern = ""
    cursor = 0
    normalized = "/" + path.strip("/")
    for match in _PARAM_RE.finditer(normalized):
        name = match.group("name")
        param_type = match.group("type") or "str"
        if param_type not in CONVERTERS:
            msg = f"Unknown path converter {param_type!r} in route {path!r}"
            raise ValueError(msg)
        regex = CONVERTERS[param_type].regex
        pattern += re.escape(normalized[cursor : match.start()])
        pattern += f"(?P<{name}>{regex})"
        params.append((name, param_type))
        cursor = match.end()
    pattern += re.escape(normalized[cursor:])
    return re.compile(f"^{pattern}$"), tuple(params)


class Router:
    """Compiled router.

    Usage::

        router = Router()
        router.add(Route("/addresses", handler, frozenset({"GET"})))
        router.add(Route("/addresses/{id:int}", handler, frozenset({"GET"})))
        router.compile()
        match = router.match("GET", "/addresses/42")
    """

    __slots__ = ("_compiled", "_routes")

    def __init__(self) -> None:
        self._routes: list[Route] = []
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route to the router. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        pattern, param_types = compile_path(route.path)
        self._routes.append(replace(route, pattern=pattern, param_types=param_types))

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in match order."""
        return list(self._routes)

    def compile(self) -> None:
        """Freeze the router, ordering static routes before parameterized ones."""
        self._routes.sort(key=lambda r: len(r.param_types))
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Match a request path and method against compiled routes.

        Raises ``NotFound`` if no route matches the path.
        Raises ``MethodNotAllowed`` if the path matches but the method doesn't.
        """
        normalized = "/" + path.strip("/")
        allowed: set[str] = set()
        for route in self._routes:
            assert route.pattern is not None
            found = route.pattern.match(normalized)
            if found is None:
                continue
            if method in route.methods:
                return RouteMatch(route=route, path_params=found.groupdict())
            allowed.update(route.methods)

        if allowed:
            raise MethodNotAllowed(frozenset(allowed))
        raise NotFound(f"No route matches {method} {path!r}")
