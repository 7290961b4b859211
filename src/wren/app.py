"""The wren application object.

An ``App`` has two phases. During setup, decorators register routes,
error handlers, template filters and globals, middleware, and lifecycle
hooks. On the first request (or ``run()``, or entering a
``TestClient``) the app freezes: it compiles the route table, builds
the kida environment, and fixes the middleware chain. Any further
registration raises ``RuntimeError``.
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from kida import Environment

from wren._internal.invoke import invoke
from wren._internal.types import ErrorHandler, Handler, Receive, Scope, Send
from wren.config import AppConfig
from wren.middleware.protocol import Middleware
from wren.routing.route import Route
from wren.routing.router import Router
from wren.server.handler import handle_request
from wren.templating.integration import create_environment

logger = logging.getLogger("wren.server")


@dataclass(frozen=True, slots=True)
class _Runtime:
    """Everything a request needs, built once at freeze time."""

    router: Router
    middleware: tuple[Middleware, ...]
    kida_env: Environment


class App:
    """A wren application.

    Usage::

        app = App(AppConfig(template_dir="templates"))

        @app.route("/addresses/new")
        def new_address(request: Request) -> Page:
            ...

    Thread safety:
        Setup happens at import time on one thread. The freeze uses a
        lock with a double check, so when several server workers take
        their first request at once exactly one of them compiles.
    """

    __slots__ = (
        "_error_handlers",
        "_freeze_lock",
        "_middleware",
        "_routes",
        "_runtime",
        "_shutdown_hooks",
        "_startup_hooks",
        "_template_filters",
        "_template_globals",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._routes: list[Route] = []
        self._middleware: list[Middleware] = []
        self._error_handlers: dict[int | type, ErrorHandler] = {}
        self._template_filters: dict[str, Callable[..., Any]] = {}
        self._template_globals: dict[str, Any] = {}
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []
        self._freeze_lock = threading.Lock()
        self._runtime: _Runtime | None = None

    # -- Setup --

    def route(
        self,
        path: str,
        *,
        methods: list[str] | None = None,
        name: str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a route handler.

        Args:
            path: URL pattern; ``{param}`` or ``{param:int}`` capture
                path segments and are passed to the handler by name.
            methods: HTTP methods, ``["GET"]`` when omitted.
            name: Optional route name.
        """
        allowed = frozenset(method.upper() for method in methods or ["GET"])

        def decorator(func: Handler) -> Handler:
            self._check_not_frozen()
            self._routes.append(Route(path, func, allowed, name=name))
            return func

        return decorator

    def error(self, code_or_exception: int | type[Exception]) -> Callable[[ErrorHandler], ErrorHandler]:
        """Register a handler for a status code or an exception type."""

        def decorator(func: ErrorHandler) -> ErrorHandler:
            self._check_not_frozen()
            self._error_handlers[code_or_exception] = func
            return func

        return decorator

    def add_middleware(self, middleware: Middleware) -> None:
        """Append *middleware*; the first one added runs outermost."""
        self._check_not_frozen()
        self._middleware.append(middleware)

    def template_filter(self, name: str | None = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register a kida filter, overriding a built-in of the same name."""

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self._check_not_frozen()
            self._template_filters[name or func.__name__] = func
            return func

        return decorator

    def template_global(self, name: str | None = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register a kida global."""

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self._check_not_frozen()
            self._template_globals[name or func.__name__] = func
            return func

        return decorator

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Run *func* (sync or async) at lifespan startup, in registration order."""
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Run *func* (sync or async) at lifespan shutdown."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    # -- Serving --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Freeze the app and serve it with pounce.

        Needs the ``server`` extra. Reloads on template and code
        changes when ``config.debug`` is set.
        """
        logging.basicConfig(
            level=self.config.log_level.upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        self._ensure_frozen()

        from wren.server.dev import run_dev_server

        bind_host = host or self.config.host
        bind_port = port or self.config.port
        logger.info("Serving on http://%s:%d", bind_host, bind_port)
        run_dev_server(self, bind_host, bind_port, reload=self.config.debug)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._lifespan(receive, send)
            return

        runtime = self._ensure_frozen()
        await handle_request(
            scope,
            receive,
            send,
            router=runtime.router,
            middleware=runtime.middleware,
            error_handlers=self._error_handlers,
            kida_env=runtime.kida_env,
            debug=self.config.debug,
            max_content_length=self.config.max_content_length,
        )

    async def _lifespan(self, receive: Receive, send: Send) -> None:
        self._ensure_frozen()
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                try:
                    for hook in self._startup_hooks:
                        await invoke(hook)
                except Exception as exc:
                    logger.exception("Startup hook failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                for hook in self._shutdown_hooks:
                    await invoke(hook)
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Freezing --

    @property
    def frozen(self) -> bool:
        return self._runtime is not None

    def _ensure_frozen(self) -> _Runtime:
        runtime = self._runtime
        if runtime is None:
            with self._freeze_lock:
                if self._runtime is None:
                    self._runtime = self._freeze()
                runtime = self._runtime
        return runtime

    def _freeze(self) -> _Runtime:
        """Compile the runtime state. Called with ``_freeze_lock`` held."""
        router = Router()
        for route in self._routes:
            router.add(route)
        router.compile()

        middleware = list(self._middleware)
        if self.config.frame_controls:
            from wren.middleware.inject import HTMLInject
            from wren.server.frame_controls import FRAME_CONTROLS_SNIPPET

            # Innermost, so user middleware sees the injected page
            middleware.append(HTMLInject(FRAME_CONTROLS_SNIPPET, full_page_only=True))

        kida_env = create_environment(self.config, self._template_filters, self._template_globals)
        logger.debug("App frozen with %d route(s)", len(router.routes))
        return _Runtime(router=router, middleware=tuple(middleware), kida_env=kida_env)

    def _check_not_frozen(self) -> None:
        if self.frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes, middleware, and filters before the first request."
            )
            raise RuntimeError(msg)
