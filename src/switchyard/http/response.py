"""Mutable HTTP response writer.

Handlers terminate a request by ending its response; everything before
``end()`` is free to change status and headers. The ASGI adapter waits on
``wait_finished()`` and then emits whatever was written.
"""

import asyncio
import json as json_module
from collections.abc import Iterator
from typing import Any

from switchyard.errors import ResponseAlreadySent

DEFAULT_CONTENT_TYPE = "text/plain; charset=utf-8"
JSON_CONTENT_TYPE = "application/json"

_MISSING: Any = object()


def error_status(error: object, default: int = 500) -> int:
    """The HTTP status an error value asks for, or *default*.

    Any object with an integer ``status`` attribute (``HTTPError`` included)
    supplies its own status.
    """
    status = getattr(error, "status", None)
    if isinstance(status, int) and not isinstance(status, bool) and status > 0:
        return status
    return default


def _is_status(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Response:
    """An HTTP response under construction.

    Set ``status`` and headers freely, then call ``end()`` (or the ``send()``
    convenience) exactly once. After that the response is *finished*: the
    dispatcher stops walking the route table and the adapter sends it.
    """

    __slots__ = ("_event", "_finished", "_headers", "body", "default_content_type", "status")

    def __init__(self, *, default_content_type: str = DEFAULT_CONTENT_TYPE) -> None:
        self.status: int = 200
        self.body: bytes = b""
        self.default_content_type = default_content_type
        self._headers: list[tuple[str, str]] = []
        self._finished = False
        self._event: asyncio.Event | None = None

    def __repr__(self) -> str:
        state = "finished" if self._finished else "open"
        return f"<Response {self.status} {state}>"

    # -- Headers --

    def set_header(self, name: str, value: str) -> None:
        """Set a header, replacing any existing values for *name*."""
        self.remove_header(name)
        self._headers.append((name, str(value)))

    def add_header(self, name: str, value: str) -> None:
        """Add a header value without replacing existing ones."""
        self._headers.append((name, str(value)))

    def get_header(self, name: str, default: str | None = None) -> str | None:
        """Return the first value for *name* (case-insensitive)."""
        lowered = name.lower()
        for key, value in self._headers:
            if key.lower() == lowered:
                return value
        return default

    def has_header(self, name: str) -> bool:
        return self.get_header(name) is not None

    def remove_header(self, name: str) -> None:
        lowered = name.lower()
        self._headers = [(key, value) for key, value in self._headers if key.lower() != lowered]

    @property
    def headers(self) -> tuple[tuple[str, str], ...]:
        """All headers in the order they were set."""
        return tuple(self._headers)

    def iter_headers(self) -> Iterator[tuple[str, str]]:
        yield from self._headers

    # -- Termination --

    @property
    def finished(self) -> bool:
        """True once ``end()`` ran."""
        return self._finished

    # Same flag under the name the terminal responder contract uses
    headers_sent = finished

    def end(self, body: str | bytes | None = None) -> None:
        """Finish the response with an optional body.

        Raises ``ResponseAlreadySent`` if the response already finished.
        """
        if self._finished:
            msg = f"response already finished with status {self.status}"
            raise ResponseAlreadySent(msg)

        if body is None:
            data = b""
        elif isinstance(body, str):
            data = body.encode("utf-8")
        else:
            data = bytes(body)

        if data and not self.has_header("content-type"):
            self.set_header("Content-Type", self.default_content_type)

        self.body = data
        self._finished = True
        if self._event is not None:
            self._event.set()

    def send(self, status_or_body: Any = _MISSING, body: Any = _MISSING) -> None:
        """Set status and/or body and end the response.

        Accepts ``send(status)``, ``send(body)`` or ``send(status, body)``:

        - strings and bytes are sent as-is;
        - exceptions are sent as ``str(error)`` with the explicit status, else
          the error's own ``status``, else 500;
        - anything else, ``None`` included, is serialized as JSON with an
          ``application/json`` content type.
        """
        status: int | None = None
        if _is_status(status_or_body):
            status = status_or_body
            data = body
        elif body is not _MISSING:
            msg = f"status must be an int when a body is given, got {status_or_body!r}"
            raise TypeError(msg)
        else:
            data = status_or_body

        if isinstance(data, BaseException):
            status = status or error_status(data)
            data = str(data)
        elif data is not _MISSING and not isinstance(data, (str, bytes, bytearray, memoryview)):
            self.set_header("Content-Type", JSON_CONTENT_TYPE)
            data = json_module.dumps(data)

        if status:
            self.status = status

        self.end(None if data is _MISSING else data)

    async def wait_finished(self) -> None:
        """Block until ``end()`` has been called."""
        if self._finished:
            return
        if self._event is None:
            self._event = asyncio.Event()
        await self._event.wait()
