"""Routing — the append-only layer table and the rules that fill and match it.

Layers are registered during setup and read concurrently by every request
being dispatched.
"""

from switchyard.routing.layer import HandlerKind, Layer, handler_arity, handler_kind
from switchyard.routing.matcher import applies
from switchyard.routing.registrar import register
from switchyard.routing.table import RouteTable

__all__ = [
    "HandlerKind",
    "Layer",
    "RouteTable",
    "applies",
    "handler_arity",
    "handler_kind",
    "register",
]
