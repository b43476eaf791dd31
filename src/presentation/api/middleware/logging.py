"""Per-request access logging."""

import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from src.infrastructure.logging.config import get_logger


logger = get_logger(__name__)


def level_for_status(status_code: int) -> str:
    """Map a response status to the log level of its access line."""
    if status_code >= 500:
        return "error"
    if status_code >= 400:
        return "warning"
    return "info"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Emits one ``request_completed`` event per request.

    ``method``, ``path`` and ``trace_id`` are not passed here; they come from
    the structlog context that ``RequestContextMiddleware`` binds around this
    middleware. A 502 from a failed welcome email therefore logs at error
    level next to the sender's own ``email_send_failed`` event.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        log = getattr(logger, level_for_status(response.status_code))
        log("request_completed", status_code=response.status_code, duration_ms=elapsed_ms)

        return response
