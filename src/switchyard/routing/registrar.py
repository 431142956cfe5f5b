"""Registration — turn a free-form argument list into layers.

``push("GET", "POST", "/api", "/v1", auth, load)`` means: for each of these
methods, at each of these paths, run each of these handlers in sequence.
Arguments may come in any order; only their kind matters.
"""

from collections.abc import Iterable
from typing import Any

from switchyard._internal.types import AnyHandler
from switchyard.errors import InvalidArgumentKind, MissingHandler
from switchyard.routing.layer import ANY_METHOD, Layer, handler_kind
from switchyard.routing.table import RouteTable


def partition_arguments(
    arguments: Iterable[Any],
) -> tuple[list[str], list[str], list[AnyHandler]]:
    """Split registration arguments into ``(methods, anchors, handlers)``.

    Strings starting with ``/`` are anchors, other strings are methods, and
    callables are handlers. A list or tuple contributes its callables as
    handlers, in order. Anything else raises ``InvalidArgumentKind``.
    """
    methods: list[str] = []
    anchors: list[str] = []
    handlers: list[AnyHandler] = []

    for argument in arguments:
        if callable(argument):
            handlers.append(argument)
        elif isinstance(argument, str):
            if argument.startswith("/"):
                anchors.append(argument)
            else:
                methods.append(argument)
        elif isinstance(argument, (list, tuple)):
            for item in argument:
                if not callable(item):
                    raise InvalidArgumentKind(item)
                handlers.append(item)
        else:
            raise InvalidArgumentKind(argument)

    return methods, anchors, handlers


def normalize_anchor(anchor: str) -> str:
    """Strip one trailing ``/`` and lowercase: ``/API/`` becomes ``/api``."""
    if anchor.endswith("/"):
        anchor = anchor[:-1]
    return anchor.lower()


def build_layers(*arguments: Any) -> list[Layer]:
    """Expand registration arguments into layers without storing them.

    Produces ``methods × anchors × handlers`` layers: methods outermost,
    handlers innermost, so the handlers given for one method/anchor pair sit
    next to each other in call order.
    """
    methods, anchors, handlers = partition_arguments(arguments)

    if not handlers:
        raise MissingHandler

    methods = [method.upper() for method in methods] or [ANY_METHOD]
    anchors = [normalize_anchor(anchor) for anchor in anchors] or [""]

    # Classify once per handler, not once per layer
    kinds = [handler_kind(handler) for handler in handlers]

    return [
        Layer(method=method, anchor=anchor, handler=handler, kind=kind)
        for method in methods
        for anchor in anchors
        for handler, kind in zip(handlers, kinds, strict=True)
    ]


def register(table: RouteTable, *arguments: Any) -> tuple[Layer, ...]:
    """Append the layers described by *arguments* to *table*.

    Validation happens before anything is appended: a bad call leaves the
    table untouched. Returns the appended layers.
    """
    layers = build_layers(*arguments)
    table.extend(layers)
    return tuple(layers)
