"""FastAPI application factory and configuration."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.container import Container
from src.infrastructure.config import get_settings
from src.infrastructure.logging.config import configure_logging, get_logger
from src.presentation.api.middleware.error_handling import setup_exception_handlers
from src.presentation.api.middleware.logging import LoggingMiddleware
from src.presentation.api.middleware.request_context import RequestContextMiddleware
from src.presentation.api.v1 import api_router


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan events."""
    container: Container = app.state.container
    logger.info(
        "application_startup",
        app_name=app.title,
        version=app.version,
        email_provider=container.config().email_provider,
    )

    yield

    # Release the email provider's HTTP client
    try:
        await container.email_sender().aclose()
        logger.info("email_sender_closed")
    except Exception as e:
        logger.error("email_sender_close_failed", error=str(e))

    logger.info("application_shutdown")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    configure_logging(settings)

    # Create and wire dependency injection container
    container = Container()
    container.wire(
        modules=[
            "src.presentation.api.v1.endpoints.users",
            "src.presentation.api.v1.endpoints.health",
        ]
    )

    tags_metadata = [
        {
            "name": "health",
            "description": "Health check and monitoring endpoints.",
        },
        {
            "name": "users",
            "description": """
User registration.

Registering a user sends exactly one welcome email through the configured
email provider. If the provider call fails the request fails with 502 and
the error envelope describes the provider response.
            """,
        },
    ]

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="User registration service that sends a welcome email through an injected email port.",
        openapi_tags=tags_metadata,
        docs_url=settings.docs_url,
        redoc_url=settings.redoc_url,
        openapi_url=settings.openapi_url,
        lifespan=lifespan,
    )

    # Store container in app state for access if needed
    app.state.container = container

    setup_exception_handlers(app)

    # Request context must wrap logging so request_completed carries trace_id
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestContextMiddleware)

    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app
