"""Application configuration with environment variable support."""

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field(default="welcome-mailer", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    app_env: str = Field(default="development", alias="APP_ENV")
    debug: bool = Field(
        default=False, alias="DEBUG", description="Add file, function and line to log events"
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, alias="PORT")
    workers: int = Field(default=1, alias="WORKERS")
    reload: bool = Field(default=False, alias="RELOAD")

    # API
    api_v1_prefix: str = Field(default="/api/v1", alias="API_V1_PREFIX")
    docs_url: str = Field(default="/docs", alias="DOCS_URL")
    redoc_url: str = Field(default="/redoc", alias="REDOC_URL")
    openapi_url: str = Field(default="/openapi.json", alias="OPENAPI_URL")

    # Email
    email_provider: Literal["postmark", "console"] = Field(
        default="postmark",
        alias="EMAIL_PROVIDER",
        description="Which email sender implementation to bind at startup",
    )
    email_from_address: str = Field(
        default="no-reply@yourapp.com",
        alias="EMAIL_FROM_ADDRESS",
        description="Sender address used for outbound email",
    )
    postmark_api_key: str = Field(
        default="dev-postmark-server-token-UNSAFE",
        alias="POSTMARK_API_KEY",
        description="Postmark server token - MUST be set in production",
    )
    postmark_base_url: str = Field(
        default="https://api.postmarkapp.com",
        alias="POSTMARK_BASE_URL",
    )

    @field_validator("postmark_api_key")
    @classmethod
    def validate_postmark_api_key(cls, v: str, info: Any) -> str:
        """Validate Postmark server token in production."""
        app_env = info.data.get("app_env", "development")
        if app_env.lower() == "production":
            if not v or "dev-postmark" in v.lower() or "unsafe" in v.lower():
                raise ValueError(
                    "POSTMARK_API_KEY must be set to a real server token in production. "
                    "Default development token is not allowed."
                )
        return v

    @field_validator("email_provider")
    @classmethod
    def validate_email_provider(cls, v: str, info: Any) -> str:
        """Reject the console sender in production."""
        app_env = info.data.get("app_env", "development")
        if app_env.lower() == "production" and v == "console":
            raise ValueError("EMAIL_PROVIDER=console is not allowed in production")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
