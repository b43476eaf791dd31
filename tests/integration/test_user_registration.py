"""Integration tests for the user registration endpoint.

Test Organization:
- TestRegisterUserSuccess: 201 and exactly one welcome email
- TestRegisterUserValidation: Invalid bodies never send
- TestRegisterUserDeliveryFailure: Provider failures map to 502
- TestRegisterUserLifecycle: Sender is closed on shutdown
"""

from typing import Any

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from httpx import AsyncClient

from src.domain.exceptions import NotificationDeliveryError
from tests.stubs import RecordingEmailSender, SentEmail


REGISTER_URL = "/api/v1/users/register"


class TestRegisterUserSuccess:
    """Test successful registration."""

    def test_returns_201_with_success_body(self, client: TestClient) -> None:
        """Test the endpoint reports success.

        Arrange: Succeeding sender stub
        Act: POST a valid email
        Assert: 201 with succeeded=true
        """
        # Act
        response = client.post(REGISTER_URL, json={"email": "user@example.com"})

        # Assert
        assert response.status_code == status.HTTP_201_CREATED
        assert response.json() == {"succeeded": True}

    def test_sends_exactly_one_welcome_email(
        self, client: TestClient, email_sender: RecordingEmailSender
    ) -> None:
        """Test one request results in one send with the exact fields."""
        client.post(REGISTER_URL, json={"email": "user@example.com"})

        assert email_sender.calls == [
            SentEmail(to="user@example.com", subject="Welcome", body="Thank you!")
        ]

    def test_lowercases_domain_and_keeps_local_part(
        self, client: TestClient, email_sender: RecordingEmailSender
    ) -> None:
        """Test the recipient is the address as validated at the HTTP boundary.

        Arrange: Succeeding sender stub
        Act: POST a mixed-case address
        Assert: Domain lowercased, local part untouched
        """
        # Act
        response = client.post(REGISTER_URL, json={"email": "User@Example.COM"})

        # Assert
        assert response.status_code == status.HTTP_201_CREATED
        assert [sent.to for sent in email_sender.calls] == ["User@example.com"]

    def test_echoes_trace_id_header(self, client: TestClient) -> None:
        """Test the request context middleware is active on the API."""
        response = client.post(
            REGISTER_URL, json={"email": "user@example.com"}, headers={"X-Trace-ID": "t-1"}
        )

        assert response.headers["X-Trace-ID"] == "t-1"

    async def test_works_with_async_client(
        self, async_client: AsyncClient, email_sender: RecordingEmailSender
    ) -> None:
        """Test the endpoint under an async client."""
        response = await async_client.post(REGISTER_URL, json={"email": "async@example.com"})

        assert response.status_code == status.HTTP_201_CREATED
        assert email_sender.call_count == 1


class TestRegisterUserValidation:
    """Test request validation."""

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"email": ""},
            {"email": "not-an-email"},
            {"email": 42},
        ],
    )
    def test_rejects_invalid_body_without_sending(
        self, client: TestClient, email_sender: RecordingEmailSender, body: dict[str, Any]
    ) -> None:
        """Test invalid bodies return 422 in the error envelope and send nothing."""
        response = client.post(REGISTER_URL, json=body)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"
        assert email_sender.call_count == 0


class TestRegisterUserDeliveryFailure:
    """Test provider failure handling."""

    def test_returns_502_with_provider_details(
        self, client: TestClient, email_sender: RecordingEmailSender
    ) -> None:
        """Test a delivery failure becomes 502 with the error envelope.

        Arrange: Sender stub raising NotificationDeliveryError
        Act: POST a valid email
        Assert: 502 with code, message and details from the exception
        """
        # Arrange
        email_sender.error = NotificationDeliveryError(
            "Email provider returned 422",
            details={"provider": "postmark", "status_code": 422, "error_code": 300},
        )

        # Act
        response = client.post(REGISTER_URL, json={"email": "user@example.com"})

        # Assert
        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert response.json() == {
            "error": {
                "code": "NOTIFICATION_DELIVERY_FAILED",
                "message": "Email provider returned 422",
                "details": {"provider": "postmark", "status_code": 422, "error_code": 300},
            }
        }

    def test_failed_send_is_attempted_once(
        self, client: TestClient, email_sender: RecordingEmailSender
    ) -> None:
        """Test the endpoint does not retry a failed send."""
        email_sender.error = NotificationDeliveryError("down")

        client.post(REGISTER_URL, json={"email": "user@example.com"})

        assert email_sender.call_count == 1


class TestRegisterUserLifecycle:
    """Test app lifespan handling of the sender."""

    def test_closes_sender_on_shutdown(self, app: Any, email_sender: RecordingEmailSender) -> None:
        """Test the email sender is closed when the app shuts down."""
        with TestClient(app):
            assert email_sender.closed is False

        assert email_sender.closed is True
