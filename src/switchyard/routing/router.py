"""Router — owns the route table and walks it for each request.

Each request gets its own walk: a cursor into the shared table plus the
pending error. Handlers move the walk forward by calling ``proceed``; a
handler that ends the response without calling it stops the walk. When the
cursor runs off the end of the table, the terminal responder is scheduled on
the event loop's next tick.

The walk is a trampoline, not a recursion: ``proceed`` called from inside a
handler that the loop is currently running only records the error, and the
loop picks it up when the handler returns. Stack depth stays constant no
matter how many layers a request passes through.
"""

import asyncio
import inspect
import logging
from typing import Any

from switchyard._internal.invoke import invoke_layer, spawn
from switchyard._internal.types import Responder
from switchyard.http.request import Request, prepare_request
from switchyard.http.response import Response
from switchyard.routing.layer import Layer
from switchyard.routing.matcher import applies
from switchyard.routing.registrar import register
from switchyard.routing.table import RouteTable
from switchyard.server.responder import respond_final

logger = logging.getLogger("switchyard.dispatch")


class Router:
    """Middleware dispatcher over an ordered table of layers.

    Usage::

        router = Router()
        router.push("/hello", lambda req, res, proceed: res.send("Hi there!"))
        router.push("GET", "/api", load_user, render_user)
        router.push(lambda err, req, res, proceed: res.send(err))

        router.dispatch(request, response)  # inside a running event loop

    Thread safety:
        Registration is a setup-phase activity. Once requests are being
        dispatched the table is only read, so any number of walks (on one
        loop or several) can share it.
    """

    __slots__ = ("_table", "responder")

    def __init__(
        self,
        *,
        responder: Responder | None = None,
        table: RouteTable | None = None,
    ) -> None:
        self._table = table if table is not None else RouteTable()
        self.responder: Responder = responder or respond_final

    # -- Registration --

    def push(self, *arguments: Any) -> tuple[Layer, ...]:
        """Register handlers for methods and path anchors, in any order.

        ``push("GET", "POST", "/a", "/b", h1, h2)`` appends eight layers:
        methods outermost, handlers innermost. Missing methods mean any
        method, missing anchors mean any path.

        Raises ``InvalidArgumentKind`` or ``MissingHandler`` immediately on a
        malformed call, leaving the table unchanged.
        """
        return register(self._table, *arguments)

    route = push

    @property
    def table(self) -> RouteTable:
        return self._table

    # -- Dispatch --

    def dispatch(
        self,
        request: Request,
        response: Response,
        responder: Responder | None = None,
    ) -> None:
        """Start walking the table for one request.

        Fills in ``request.path`` and ``request.query``, then runs matching
        layers until one ends the response or the table is exhausted. Must be
        called with a running event loop; the terminal responder is
        scheduled on it.
        """
        loop = asyncio.get_running_loop()
        prepare_request(request)
        walk = _Walk(
            table=self._table,
            request=request,
            response=response,
            responder=responder or self.responder,
            loop=loop,
        )
        walk.proceed()

    __call__ = dispatch


class _Walk:
    """Per-request dispatch state: cursor, pending error, termination flags."""

    __slots__ = (
        "error",
        "exhausted",
        "index",
        "loop",
        "method",
        "path",
        "pending",
        "request",
        "responder",
        "response",
        "running",
        "table",
    )

    def __init__(
        self,
        *,
        table: RouteTable,
        request: Request,
        response: Response,
        responder: Responder,
        loop: asyncio.AbstractEventLoop,
    ) -> None:
        self.table = table
        self.request = request
        self.response = response
        self.responder = responder
        self.loop = loop
        self.method = request.method
        self.path = request.path
        self.index = 0
        self.error: Any = None
        self.pending = False
        self.running = False
        self.exhausted = False

    def proceed(self, error: Any = None) -> None:
        """The continuation handed to handlers."""
        if self.exhausted:
            logger.debug("proceed() after route table exhausted: %s %s", self.method, self.path)
            return
        if self.response.finished:
            logger.debug(
                "proceed() after response finished (%d): %s %s",
                self.response.status,
                self.method,
                self.path,
            )
            return

        self.error = error
        self.pending = True
        if not self.running:
            self._run()

    def _run(self) -> None:
        self.running = True
        try:
            while self.pending:
                self.pending = False
                layer = self._next_applicable()
                if layer is None:
                    self._exhaust()
                    return
                invoke_layer(layer, self.error, self.request, self.response, self.proceed)
        finally:
            self.running = False

    def _next_applicable(self) -> Layer | None:
        table = self.table
        while self.index < len(table):
            layer = table[self.index]
            self.index += 1
            if applies(layer, self.method, self.path):
                return layer
        return None

    def _exhaust(self) -> None:
        self.exhausted = True
        logger.debug("route table exhausted: %s %s", self.method, self.path)
        self.loop.call_soon(self._respond, self.error)

    def _respond(self, error: Any) -> None:
        try:
            result = self.responder(error, self.request, self.response)
        except Exception as exc:
            self._responder_failed(exc)
            return
        if inspect.isawaitable(result):
            spawn(result).add_done_callback(self._responder_done)

    def _responder_done(self, task: asyncio.Future[Any]) -> None:
        if task.cancelled():
            self._responder_failed(None)
        elif task.exception() is not None:
            self._responder_failed(task.exception())

    def _responder_failed(self, exc: BaseException | None) -> None:
        logger.error("terminal responder failed: %s %s", self.method, self.path, exc_info=exc)
        if not self.response.finished:
            self.response.status = 500
            self.response.end("Internal Server Error")
