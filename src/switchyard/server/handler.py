"""ASGI handler — translates ASGI scope/messages to switchyard types.

The only component that touches raw ASGI HTTP messages. Builds a Request and
an open Response, starts the router's walk, waits for the response to
finish, and sends it back through ASGI ``send()``.
"""

from switchyard._internal.asgi import Receive, Scope, Send
from switchyard.config import AppConfig
from switchyard.http.request import Request
from switchyard.http.response import Response
from switchyard.routing.router import Router
from switchyard.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    config: AppConfig,
) -> None:
    """Process a single HTTP request through the route table."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)
    response = Response(default_content_type=config.default_content_type)

    router.dispatch(request, response)
    await response.wait_finished()

    await send_response(response, send, head=request.method == "HEAD")
