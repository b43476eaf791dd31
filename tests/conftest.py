"""Global test configuration and fixtures.

Fixture Scoping Strategy:
- session: Test settings (immutable)
- function: Email sender stub, app instance, clients (need fresh state)
"""

from collections.abc import AsyncGenerator, Generator
from typing import Any

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from src.infrastructure.config import Settings, get_settings
from src.presentation.api import create_app
from tests.stubs import RecordingEmailSender


# ============================================================================
# Session-Scoped Fixtures (Immutable Resources)
# ============================================================================


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Create test settings (session-scoped).

    Returns:
        Settings instance configured for testing
    """
    return Settings(
        app_env="testing",
        app_name="welcome-mailer-test",
        debug=True,
        log_level="DEBUG",
        email_provider="console",
        postmark_api_key="test-server-token",
    )


# ============================================================================
# Function-Scoped Fixtures (Stateful Resources)
# ============================================================================


@pytest.fixture
def email_sender() -> RecordingEmailSender:
    """Create a recording email sender stub (function-scoped).

    Each test gets a fresh stub so call counts never leak between tests.

    Returns:
        RecordingEmailSender that succeeds by default
    """
    return RecordingEmailSender()


@pytest.fixture
def app(test_settings: Settings, email_sender: RecordingEmailSender) -> Any:
    """Create FastAPI application with the email sender replaced by a stub.

    Args:
        test_settings: Test configuration (session-scoped)
        email_sender: Recording stub bound to the email port

    Returns:
        FastAPI application instance with mocked dependencies
    """
    app = create_app()

    app.state.container.config.override(providers.Object(test_settings))
    app.state.container.email_sender.override(providers.Object(email_sender))
    app.dependency_overrides[get_settings] = lambda: test_settings

    yield app

    app.state.container.unwire()
    app.state.container.reset_override()


@pytest.fixture
def client(app: Any) -> Generator[TestClient]:
    """Create test client for synchronous API testing (function-scoped).

    Args:
        app: FastAPI application

    Yields:
        TestClient: Synchronous test client
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def async_client(app: Any) -> AsyncGenerator[AsyncClient]:
    """Create async test client for async API testing (function-scoped).

    Args:
        app: FastAPI application

    Yields:
        AsyncClient: Async HTTP client
    """
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers (in addition to pyproject.toml)."""
    config.addinivalue_line("markers", "unit: Fast unit tests with mocked dependencies")
    config.addinivalue_line("markers", "integration: Tests exercising the HTTP surface")
