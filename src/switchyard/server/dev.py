"""Server startup.

Starts a pounce ASGI server with the live switchyard App object.
"""


def run_server(
    app: object,
    host: str,
    port: int,
    *,
    reload: bool = False,
    app_path: str | None = None,
) -> None:
    """Start a single-worker pounce server for *app*.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``), but
    here we hold a live ``App`` object, so ``pounce.Server`` is driven
    directly with the ASGI callable.

    Args:
        app: ASGI callable (switchyard App instance).
        host: Bind host address.
        port: Bind port number.
        reload: Restart on file changes.
        app_path: Optional ``"module:attribute"`` import string. When
            provided, pounce reimports the app on each reload cycle so that
            code changes on disk take effect.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
    )
    server = Server(config, app, app_path=app_path)
    server.run()
