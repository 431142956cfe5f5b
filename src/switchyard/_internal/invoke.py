"""Invoke helpers — run one layer's handler against the current error state.

A layer runs only when its kind fits the error state: normal handlers while
no error is pending, error handlers while one is. A mismatched layer is
skipped by calling ``proceed`` straight away with the error unchanged.

Handlers can be ``def`` or ``async def``. A coroutine result is scheduled as
a task on the running loop; whatever it raises is handed to ``proceed`` just
like a synchronous raise.

Usage::

    from switchyard._internal.invoke import invoke_layer

    invoke_layer(layer, error, request, response, proceed)
"""

import asyncio
import inspect
import logging
from collections.abc import Awaitable
from functools import partial
from typing import Any

from switchyard._internal.types import ErrorHandler, Handler, Proceed
from switchyard.errors import HTTPError
from switchyard.routing.layer import HandlerKind, Layer

logger = logging.getLogger("switchyard.dispatch")

# asyncio keeps only weak references to tasks
_running_tasks: set[asyncio.Future[Any]] = set()


def invoke_layer(
    layer: Layer,
    error: Any,
    request: Any,
    response: Any,
    proceed: Proceed,
) -> None:
    """Run *layer* if its kind fits *error*, otherwise pass straight through.

    Never raises for handler failures: an exception raised by the handler
    becomes the error given to ``proceed``.
    """
    try:
        if error is not None and layer.kind is HandlerKind.ERROR:
            on_error: ErrorHandler = layer.handler  # type: ignore[assignment]
            result = on_error(error, request, response, proceed)
        elif error is None and layer.kind is HandlerKind.NORMAL:
            handler: Handler = layer.handler  # type: ignore[assignment]
            result = handler(request, response, proceed)
        else:
            proceed(error)
            return
    except Exception as exc:
        proceed(exc)
        return

    if inspect.isawaitable(result):
        _await_handler(result, proceed)


def spawn(awaitable: Awaitable[Any]) -> asyncio.Future[Any]:
    """Schedule *awaitable* on the running loop and keep it alive until done."""
    task = asyncio.ensure_future(awaitable)
    _running_tasks.add(task)
    task.add_done_callback(_running_tasks.discard)
    return task


def _await_handler(awaitable: Awaitable[Any], proceed: Proceed) -> None:
    """Run an async handler's awaitable in the background."""
    task = spawn(awaitable)
    task.add_done_callback(partial(_settle, proceed=proceed))


def _settle(task: asyncio.Future[Any], *, proceed: Proceed) -> None:
    if task.cancelled():
        logger.debug("async handler cancelled; reporting as error")
        proceed(HTTPError(500, "Handler cancelled"))
        return
    exc = task.exception()
    if exc is not None:
        proceed(exc)
