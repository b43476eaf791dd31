"""Request context middleware.

Binds a per-request ``trace_id`` into the structlog context so every log line
emitted while handling a command (including the email sender's) can be
correlated. The id is taken from, in order:

1. The active OpenTelemetry span (when tracing is instrumented)
2. An incoming ``X-Trace-ID`` header
3. Cloudflare's ``CF-Ray`` header
4. A freshly generated UUIDv7

Header values are only used when they match ``TRACE_ID_PATTERN``: at most
128 letters, digits and the characters ``._:-``. Anything else falls
through to the next source.
"""

import re
from collections.abc import Awaitable, Callable

import structlog
from fastapi import Request, Response
from opentelemetry import trace
from starlette.middleware.base import BaseHTTPMiddleware
from uuid_extension import uuid7


TRACE_ID_HEADER = "X-Trace-ID"
TRACE_ID_PATTERN = re.compile(r"[A-Za-z0-9._:-]{1,128}")


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware for trace_id management.

    The trace_id is available in ``request.state.trace_id``, in the structlog
    context, and in the ``X-Trace-ID`` response header.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Extract/generate trace_id and bind to request context."""
        span_context = trace.get_current_span().get_span_context()
        trace_id = self._extract_trace_id(request, span_context)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            trace_id=trace_id,
            method=request.method,
            path=request.url.path,
        )

        request.state.trace_id = trace_id

        response = await call_next(request)

        response.headers[TRACE_ID_HEADER] = trace_id

        return response

    def _extract_trace_id(
        self,
        request: Request,
        span_context: trace.SpanContext,
    ) -> str:
        """Extract trace_id with proper priority.

        Args:
            request: FastAPI request object
            span_context: OpenTelemetry span context

        Returns:
            Trace ID string
        """
        if span_context.is_valid:
            return format(span_context.trace_id, "032x")

        for header in (TRACE_ID_HEADER, "CF-Ray"):
            value = request.headers.get(header)
            if value and TRACE_ID_PATTERN.fullmatch(value):
                return value

        return str(uuid7())
