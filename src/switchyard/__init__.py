"""Switchyard — ordered middleware dispatch for ASGI.

An ordered table of layers, each guarded by an HTTP method and a path
prefix, run in registration order until one of them ends the response.

Basic usage::

    from switchyard import App

    app = App()
    route = app.push

    def hello(request, response, proceed):
        response.send("Hi there!")

    def on_error(error, request, response, proceed):
        response.send(error)

    route("/hello", hello)
    route(on_error)

    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "HTTPError",
    "HandlerKind",
    "InvalidArgumentKind",
    "Layer",
    "MissingHandler",
    "NotFound",
    "Request",
    "Response",
    "ResponseAlreadySent",
    "RouteTable",
    "Router",
    "SwitchyardError",
    "respond_final",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import switchyard`` fast while providing a clean top-level API.
    """
    if name == "App":
        from switchyard.app import App

        return App

    if name == "AppConfig":
        from switchyard.config import AppConfig

        return AppConfig

    if name == "Router":
        from switchyard.routing.router import Router

        return Router

    if name in ("HandlerKind", "Layer", "RouteTable"):
        from switchyard import routing as _routing

        return getattr(_routing, name)

    if name == "Request":
        from switchyard.http.request import Request

        return Request

    if name == "Response":
        from switchyard.http.response import Response

        return Response

    if name == "respond_final":
        from switchyard.server.responder import respond_final

        return respond_final

    if name in (
        "ConfigurationError",
        "HTTPError",
        "InvalidArgumentKind",
        "MissingHandler",
        "NotFound",
        "ResponseAlreadySent",
        "SwitchyardError",
    ):
        from switchyard import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
