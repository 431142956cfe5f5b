"""Per-request HTTP request object.

Unlike the response, the request never changes once dispatch starts, except
for ``prepare_request()`` filling in ``path`` and ``query`` and handlers
writing into ``state`` to hand data to later layers.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from dataclasses import dataclass, field
from typing import Any

from switchyard._internal.asgi import Receive, Scope
from switchyard.http.headers import Headers
from switchyard.http.query import QueryParams


async def _no_body() -> dict[str, Any]:
    return {"type": "http.request", "body": b"", "more_body": False}


@dataclass(slots=True, eq=False)
class Request:
    """An HTTP request as seen by handlers.

    ``url`` is the target as received (path plus query string). ``path`` and
    ``query`` are derived from it by ``prepare_request()`` when dispatch
    begins; ``path`` is always lowercase, ``raw_path`` keeps the original case.
    """

    method: str
    url: str = "/"
    headers: Headers = field(default_factory=Headers)
    http_version: str = "1.1"
    server: tuple[str, int] | None = None
    client: tuple[str, int] | None = None

    path: str = "/"
    raw_path: str = "/"
    query: QueryParams = field(default_factory=QueryParams)

    # Free-form scratch space shared by the layers handling this request
    state: dict[str, Any] = field(default_factory=dict)

    _receive: Receive = field(default=_no_body, repr=False)
    _body: bytes | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.method = self.method.upper()

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    # -- Raw body access (no parsing) --

    async def body(self) -> bytes:
        """Read the full request body.

        The ASGI receive channel is consumed once; later calls return the
        same bytes.
        """
        if self._body is None:
            self._body = b"".join([chunk async for chunk in self.stream()])
        return self._body

    async def stream(self) -> AsyncGenerator[bytes]:
        """Stream the request body in chunks."""
        while True:
            message = await self._receive()
            if message.get("type") == "http.disconnect":
                break
            body = message.get("body", b"")
            if body:
                yield body
            if not message.get("more_body", False):
                break

    # -- Factory --

    @classmethod
    def from_asgi(cls, scope: Scope, receive: Receive) -> Request:
        """Create a Request from an ASGI HTTP scope and receive callable."""
        query_string = scope.get("query_string", b"").decode("latin-1")
        url = scope["path"]
        if query_string:
            url = f"{url}?{query_string}"
        server = scope.get("server")
        client = scope.get("client")
        return cls(
            method=scope["method"],
            url=url,
            headers=Headers(tuple(scope.get("headers", ()))),
            http_version=scope.get("http_version", "1.1"),
            server=tuple(server) if server else None,
            client=tuple(client) if client else None,
            _receive=receive,
        )


def prepare_request(request: Request) -> Request:
    """Derive ``path``, ``raw_path`` and ``query`` from ``request.url``.

    ``path`` is the pathname without query string or fragment, lowercased,
    and ``"/"`` when empty.
    """
    target = request.url.partition("#")[0]
    pathname, _, query_string = target.partition("?")
    pathname = pathname or "/"
    request.raw_path = pathname
    request.path = pathname.lower()
    request.query = QueryParams(query_string)
    return request
