"""External service interface definitions.

This module defines abstract interfaces for external services, enabling
dependency injection and facilitating testing with stub implementations.
"""

from abc import ABC, abstractmethod


class IEmailSender(ABC):
    """Abstract interface for sending email.

    Command handlers depend on this contract only. Concrete senders
    (Postmark, console) live in the infrastructure side and are bound by the
    container.
    """

    @abstractmethod
    async def send_email(self, to: str, subject: str, body: str) -> None:
        """Send an email message to a recipient.

        Args:
            to: Recipient email address
            subject: Email subject line
            body: Email body content

        Raises:
            NotificationDeliveryError: If the provider call fails
            ValidationError: If any argument is empty
        """
