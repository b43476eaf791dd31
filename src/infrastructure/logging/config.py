"""Structlog setup for the service.

Every event goes through one chain: request context from contextvars, level
and logger name, a UTC timestamp, the service identity, OpenTelemetry span
ids, then credential redaction. Development renders for a terminal; every
other environment emits one JSON object per line.
"""

import logging
import sys
from typing import Any

import structlog
from opentelemetry import trace
from structlog.typing import EventDict, Processor, WrappedLogger

from src.infrastructure.config import Settings
from src.utils.sanitizer import sanitize_dict


CALLSITE_FIELDS = {
    structlog.processors.CallsiteParameter.FILENAME,
    structlog.processors.CallsiteParameter.FUNC_NAME,
    structlog.processors.CallsiteParameter.LINENO,
}


def redact_credentials(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Replace Postmark tokens, API keys and auth headers with a marker."""
    return sanitize_dict(event_dict, recursive=True)


def add_span_ids(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Attach OpenTelemetry ids when a valid span is active.

    A ``trace_id`` already bound by the request context is kept.
    """
    span_context = trace.get_current_span().get_span_context()
    if not span_context.is_valid:
        return event_dict

    event_dict.setdefault("trace_id", format(span_context.trace_id, "032x"))
    event_dict["span_id"] = format(span_context.span_id, "016x")
    return event_dict


def service_identity(settings: Settings) -> Processor:
    """Build a processor stamping each event with the service name and env."""

    def add_service(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", settings.app_name)
        event_dict.setdefault("env", settings.app_env)
        return event_dict

    return add_service


def build_processors(settings: Settings) -> list[Processor]:
    """Assemble the processor chain for the given settings.

    ``DEBUG=true`` adds the file, function and line of each log call.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        service_identity(settings),
        add_span_ids,
        redact_credentials,
    ]

    if settings.debug:
        processors.append(structlog.processors.CallsiteParameterAdder(CALLSITE_FIELDS))

    if settings.is_development:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))
    else:
        processors.extend([structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()])

    return processors


def configure_logging(settings: Settings) -> None:
    """Route structlog through stdlib logging at the configured level."""
    level = logging.getLevelNamesMapping().get(settings.log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    structlog.configure(
        processors=build_processors(settings),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
