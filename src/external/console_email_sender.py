"""Console email sender for local development.

Implements the email port by logging the message instead of calling a
provider. Never used in production (rejected by settings validation).
"""

from src.domain.models.email_message import EmailMessage
from src.external.interfaces import IEmailSender
from src.infrastructure.logging.config import get_logger


logger = get_logger(__name__)


class ConsoleEmailSender(IEmailSender):
    """Email sender that writes messages to the structured log."""

    def __init__(self, from_address: str = "no-reply@yourapp.com") -> None:
        self._from_address = from_address

    async def send_email(self, to: str, subject: str, body: str) -> None:
        message = EmailMessage.create(to=to, subject=subject, body=body)
        logger.info(
            "console_email",
            sender=self._from_address,
            to=message.to,
            subject=message.subject,
            body=message.body,
        )

    async def aclose(self) -> None:
        """No resources to release."""
