"""Layer frozen dataclass and handler classification."""

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from switchyard._internal.types import AnyHandler

ANY_METHOD = "*"

# Positional parameter count that marks an error handler:
# (error, request, response, proceed)
ERROR_HANDLER_ARITY = 4

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


class HandlerKind(Enum):
    """Which error state a layer's handler runs in."""

    NORMAL = "normal"
    ERROR = "error"


def handler_arity(handler: Callable[..., Any]) -> int:
    """Count the required positional parameters of *handler*.

    Parameters with defaults, ``*args``, ``**kwargs`` and keyword-only
    parameters are not counted, so ``def h(req, res, proceed=None)`` has
    arity 2. Bound methods and ``functools.partial`` objects report what is
    left to pass. Callables without an inspectable signature count as 0.
    """
    try:
        signature = inspect.signature(handler)
    except (TypeError, ValueError):
        return 0
    return sum(
        1
        for param in signature.parameters.values()
        if param.kind in _POSITIONAL and param.default is inspect.Parameter.empty
    )


def handler_kind(handler: AnyHandler) -> HandlerKind:
    """Classify *handler* by arity: exactly 4 makes it an error handler."""
    if handler_arity(handler) == ERROR_HANDLER_ARITY:
        return HandlerKind.ERROR
    return HandlerKind.NORMAL


@dataclass(frozen=True, slots=True)
class Layer:
    """One registered rule: a method, a path anchor and a handler.

    Created by the registrar, never mutated afterwards.
    """

    method: str
    anchor: str
    handler: AnyHandler
    kind: HandlerKind = HandlerKind.NORMAL

    @property
    def is_error_handler(self) -> bool:
        return self.kind is HandlerKind.ERROR

    def describe(self) -> str:
        """Human-readable one-liner, e.g. ``GET /api -> lookup``."""
        name = getattr(self.handler, "__name__", None) or repr(self.handler)
        anchor = self.anchor or "/"
        marker = " [error]" if self.is_error_handler else ""
        return f"{self.method} {anchor} -> {name}{marker}"
