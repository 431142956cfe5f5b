"""Shared type aliases used across switchyard modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# The continuation handed to every handler; call with an error to skip ahead
Proceed: TypeAlias = Callable[..., None]

# Normal handler: (request, response, proceed)
Handler: TypeAlias = Callable[[Any, Any, Proceed], Any]

# Error handler: (error, request, response, proceed)
ErrorHandler: TypeAlias = Callable[[Any, Any, Any, Proceed], Any]

# Either kind, as registered; which one it is gets decided by arity
AnyHandler: TypeAlias = Handler | ErrorHandler

# Terminal responder: (error, request, response)
Responder: TypeAlias = Callable[[Any, Any, Any], Any]
