"""Postmark transactional email integration.

Sends one message per call through the Postmark HTTP API using a
long-lived httpx client.
"""

from typing import Any

import httpx

from src.domain.exceptions import NotificationDeliveryError
from src.domain.models.email_message import EmailMessage
from src.external.interfaces import IEmailSender
from src.infrastructure.logging.config import get_logger


logger = get_logger(__name__)

SERVER_TOKEN_HEADER = "X-Postmark-Server-Token"


class PostmarkEmailSender(IEmailSender):
    """Email sender backed by the Postmark API.

    Owns the HTTP client and the server token. The client is created once
    and shared across calls; it is never mutated after construction.
    """

    def __init__(
        self,
        api_key: str,
        from_address: str = "no-reply@yourapp.com",
        base_url: str = "https://api.postmarkapp.com",
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the Postmark sender.

        Args:
            api_key: Postmark server token
            from_address: Sender address for every outbound message
            base_url: Postmark API base URL
            client: Optional pre-built HTTP client (tests inject one with a mock transport)
        """
        self._api_key = api_key
        self._from_address = from_address
        self._base_url = base_url
        self._client = client or httpx.AsyncClient(base_url=base_url)

    async def send_email(self, to: str, subject: str, body: str) -> None:
        """Send an email through Postmark.

        Args:
            to: Recipient email address
            subject: Email subject
            body: Plain-text email body

        Raises:
            ValidationError: If any argument is blank
            NotificationDeliveryError: If the request fails or Postmark rejects it
        """
        message = EmailMessage.create(to=to, subject=subject, body=body)

        try:
            response = await self._client.post(
                f"{self._base_url}/email",
                json=self._build_payload(message),
                headers={
                    "Accept": "application/json",
                    SERVER_TOKEN_HEADER: self._api_key,
                },
            )
        except httpx.HTTPError as e:
            logger.error(
                "email_send_failed",
                to=message.to,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise NotificationDeliveryError(
                "Email provider request failed",
                details={"provider": "postmark", "error": str(e)},
            ) from e

        content = self._parse_body(response)
        error_code = content.get("ErrorCode", 0)
        if not response.is_success or error_code:
            logger.error(
                "email_send_failed",
                to=message.to,
                status_code=response.status_code,
                error_code=error_code,
            )
            raise NotificationDeliveryError(
                f"Email provider returned {response.status_code}",
                details={
                    "provider": "postmark",
                    "status_code": response.status_code,
                    "error_code": error_code,
                    "message": content.get("Message"),
                },
            )

        logger.info("email_sent_successfully", to=message.to, message_id=content.get("MessageID"))

    def _build_payload(self, message: EmailMessage) -> dict[str, str]:
        """Map a message onto Postmark's single-email JSON body."""
        return {
            "From": self._from_address,
            "To": message.to,
            "Subject": message.subject,
            "TextBody": message.body,
        }

    @staticmethod
    def _parse_body(response: httpx.Response) -> dict[str, Any]:
        """Decode a Postmark response body; non-JSON bodies yield an empty dict."""
        try:
            content = response.json()
        except ValueError:
            return {}
        return content if isinstance(content, dict) else {}

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
