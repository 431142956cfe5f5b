"""Switchyard exception hierarchy.

Shared across the registrar, dispatcher, responder, and ASGI adapter so
every module raises and catches the same types.
"""

from dataclasses import dataclass


class SwitchyardError(Exception):
    """Base for all switchyard-specific errors."""


class ConfigurationError(SwitchyardError):
    """Raised when the route table is set up incorrectly.

    Always raised synchronously from ``push()``, never deferred to request time.
    """


class InvalidArgumentKind(ConfigurationError, TypeError):  # noqa: N818
    """A registration argument is neither a string nor a callable."""

    def __init__(self, argument: object) -> None:
        self.argument = argument
        super().__init__(
            f"route arguments must be strings or callables, got {type(argument).__name__}: "
            f"{argument!r}"
        )


class MissingHandler(ConfigurationError):  # noqa: N818
    """A registration call named no handler callable."""

    def __init__(self, detail: str = "missing handler function") -> None:
        super().__init__(detail)


class ResponseAlreadySent(SwitchyardError):  # noqa: N818
    """``Response.end()`` was called on a response that already finished."""


@dataclass(frozen=True, slots=True)
class HTTPError(SwitchyardError):
    """An error value that carries its own HTTP status.

    Pass it to ``proceed`` (or raise it from a handler) to select error
    layers; when nothing clears it, the terminal responder renders it with
    ``status`` and ``str(error)``.
    """

    status: int = 500
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return self.detail
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — no layer terminated the request."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
