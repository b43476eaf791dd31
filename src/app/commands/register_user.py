"""User registration command."""

from dataclasses import dataclass

from src.app.commands.base import ICommandHandler
from src.domain.exceptions import ValidationError
from src.domain.result import Result
from src.external.interfaces import IEmailSender
from src.infrastructure.logging.config import get_logger


logger = get_logger(__name__)

WELCOME_SUBJECT = "Welcome"
WELCOME_BODY = "Thank you!"


@dataclass(frozen=True)
class RegisterUserCommand:
    """Request to register a new user."""

    email: str


class RegisterUserCommandHandler(ICommandHandler[RegisterUserCommand, Result]):
    """Registers a user, then sends exactly one welcome email.

    The email is awaited. If the send fails the error propagates to the
    caller and the registration step is not rolled back.
    """

    def __init__(self, email_sender: IEmailSender) -> None:
        self._email_sender = email_sender

    async def handle(self, command: RegisterUserCommand) -> Result:
        """Execute the registration.

        Args:
            command: Registration request

        Returns:
            Successful result once the welcome email has been accepted

        Raises:
            ValidationError: If the email address is blank (no email is sent)
            NotificationDeliveryError: If the welcome email could not be sent
        """
        if not command.email or not command.email.strip():
            raise ValidationError("Email address is required")

        logger.info("user_registered", email=command.email)

        try:
            await self._email_sender.send_email(command.email, WELCOME_SUBJECT, WELCOME_BODY)
        except Exception as exc:
            logger.error("welcome_email_failed", email=command.email, error=str(exc))
            raise

        logger.info("welcome_email_sent", email=command.email)
        return Result.success()
