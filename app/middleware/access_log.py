"""Access-log middleware: one log line per request with status and latency."""


import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("app.access")

# Methods that mutate state are logged at INFO, reads at DEBUG
_WRITE_METHODS = {"POST", "PUT", "PATCH", "DELETE"}

class RequestLogMiddleware(BaseHTTPMiddleware):
    """Logs ``METHOD path -> status (N ms)`` for every request.

    Request bodies are never logged: signup/login bodies carry passwords.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = round((time.monotonic() - start) * 1000)

        level = logging.INFO if request.method in _WRITE_METHODS else logging.DEBUG
        if response.status_code >= 500:
            level = logging.ERROR
        logger.log(
            level,
            "%s %s -> %s (%dms)",
            request.method, request.url.path, response.status_code, duration_ms,
        )
        return response
