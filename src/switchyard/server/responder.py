"""Terminal responder — what happens when no layer ends the response.

Runs once per request, after the route table is exhausted. A pending error
is rendered with its own status (default 500); no error means 404.
"""

import logging
from typing import Any

from switchyard.http.request import Request
from switchyard.http.response import Response, error_status

logger = logging.getLogger("switchyard.server")

NOT_FOUND_BODY = "Not Found"


def respond_final(error: Any, request: Request, response: Response) -> None:
    """Default terminal responder.

    - response already finished: nothing to do;
    - error pending: ``error.status`` or 500, body ``str(error)``;
    - otherwise: 404 ``Not Found``.
    """
    if response.finished:
        return

    if error is not None:
        status = error_status(error)
        log_unhandled(error, request, status)
        response.status = status
        response.end(str(error))
        return

    response.status = 404
    response.end(NOT_FOUND_BODY)


def log_unhandled(error: Any, request: Request, status: int) -> None:
    """Log an error that no error layer cleared.

    Server errors get a traceback at ERROR; client errors are routine and
    only show up at DEBUG.
    """
    if status >= 500:
        exc_info = error if isinstance(error, BaseException) else None
        logger.error("%d %s %s: %s", status, request.method, request.path, error, exc_info=exc_info)
    else:
        logger.debug("%d %s %s: %s", status, request.method, request.path, error)
