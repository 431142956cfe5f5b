"""Switchyard application class.

Bundles a Router with configuration and the ASGI entry point. The route
table stays open for registration for the lifetime of the app; by convention
registration finishes before the first request arrives.
"""

import inspect
import logging
from collections.abc import Callable
from typing import Any

from switchyard._internal.asgi import Receive, Scope, Send
from switchyard._internal.types import Responder
from switchyard.config import AppConfig
from switchyard.errors import ConfigurationError
from switchyard.routing.layer import Layer
from switchyard.routing.router import Router
from switchyard.server.handler import handle_request

logger = logging.getLogger("switchyard.server")


class App:
    """The switchyard application.

    Usage::

        app = App()
        route = app.push

        route("/hello", lambda req, res, proceed: res.send("Hi there!"))

        app.run()
    """

    __slots__ = ("_shutdown_hooks", "_startup_hooks", "config", "router")

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        responder: Responder | None = None,
        router: Router | None = None,
    ) -> None:
        if router is not None and responder is not None:
            msg = "pass a responder to the Router, not to App, when supplying a router"
            raise ConfigurationError(msg)
        self.config: AppConfig = config or AppConfig()
        self.router = router if router is not None else Router(responder=responder)
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []

    # -- Route registration --

    def push(self, *arguments: Any) -> tuple[Layer, ...]:
        """Register layers. See ``Router.push``."""
        return self.router.push(*arguments)

    route = push

    # -- Lifecycle hooks --

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync startup hook via decorator.

        Hooks run in registration order during ASGI lifespan startup,
        before the server begins accepting HTTP requests.
        """
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync shutdown hook via decorator.

        Hooks run in registration order during ASGI lifespan shutdown.
        """
        self._shutdown_hooks.append(func)
        return func

    async def startup(self) -> None:
        """Run startup hooks."""
        await _run_hooks(self._startup_hooks)

    async def shutdown(self) -> None:
        """Run shutdown hooks."""
        await _run_hooks(self._shutdown_hooks)

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Configure logging and serve the app with pounce.

        Args:
            host: Override bind host.
            port: Override bind port.
        """
        from switchyard.server.dev import run_server

        configure_logging(self.config.effective_log_level)
        _host = host or self.config.host
        _port = port or self.config.port
        logger.info("serving %d layers on http://%s:%d", len(self.router.table), _host, _port)
        run_server(self, _host, _port, reload=self.config.effective_reload)

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(scope, receive, send, router=self.router, config=self.config)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol."""
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    await self.startup()
                except Exception as exc:
                    logger.exception("startup hook failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                try:
                    await self.shutdown()
                except Exception as exc:
                    logger.exception("shutdown hook failed")
                    await send({"type": "lifespan.shutdown.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.shutdown.complete"})
                return


async def _run_hooks(hooks: list[Callable[..., Any]]) -> None:
    for hook in hooks:
        result = hook()
        if inspect.isawaitable(result):
            await result


def configure_logging(level: str) -> None:
    """Install a basic stderr handler at *level* (``"info"``, ``"debug"``, ...)."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )
    logging.getLogger("switchyard").setLevel(level.upper())
