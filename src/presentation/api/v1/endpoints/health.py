"""Health check endpoints for monitoring and orchestration."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from src.infrastructure.config import Settings, get_settings


router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    environment: str
    email_provider: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "version": "0.1.0",
                    "environment": "production",
                    "email_provider": "postmark",
                }
            ]
        }
    }


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health Check",
    description="Report service status and the email provider bound at startup.",
)
async def health_check(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Health check endpoint.

    The provider is not contacted; this only reports configuration.
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        environment=settings.app_env,
        email_provider=settings.email_provider,
    )


@router.get(
    "/",
    status_code=status.HTTP_200_OK,
    summary="API Root",
)
async def root(
    settings: Annotated[Settings, Depends(get_settings)],
) -> dict[str, str]:
    """Root endpoint providing API information and navigation links.

    Links are absolute paths: docs live at the app root, health under the
    versioned API prefix.
    """
    return {
        "message": f"Welcome to {settings.app_name}",
        "docs": settings.docs_url,
        "health": f"{settings.api_v1_prefix}/health",
    }
