"""Development server.

Starts a pounce ASGI server with the live wren App object.
"""

from __future__ import annotations


def run_dev_server(
    app: object,
    host: str,
    port: int,
    *,
    reload: bool = True,
    reload_include: tuple[str, ...] = (".html",),
    app_path: str | None = None,
) -> None:
    """Start a pounce server with the given wren App.

    Pounce's ``run()`` takes an import string (e.g. ``"myapp:app"``),
    but wren has a live ``App`` object, so ``pounce.Server`` is used
    directly with the ASGI callable.

    Args:
        app: ASGI callable (wren App instance).
        host: Bind host address.
        port: Bind port number.
        reload: Enable auto-reload on file changes.
        reload_include: Extra file extensions to watch when reloading.
        app_path: Optional ``"module:attribute"`` import string so
            pounce can reimport the app on each reload.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
        reload_include=reload_include,
    )
    server = Server(config, app, app_path=app_path)
    server.run()
