"""Dependency injection container configuration."""

from dependency_injector import containers, providers

from src.app.commands.register_user import RegisterUserCommandHandler
from src.external.console_email_sender import ConsoleEmailSender
from src.external.interfaces import IEmailSender
from src.external.postmark_email_sender import PostmarkEmailSender
from src.infrastructure.config import get_settings


class Commands(containers.DeclarativeContainer):
    """Command handlers container."""

    email_sender: providers.Dependency[IEmailSender] = providers.Dependency(
        instance_of=IEmailSender
    )

    register_user = providers.Factory(RegisterUserCommandHandler, email_sender=email_sender)


class Container(containers.DeclarativeContainer):
    """Application dependency injection container."""

    wiring_config = containers.WiringConfiguration(
        modules=[
            "src.presentation.api.v1.endpoints.users",
            "src.presentation.api.v1.endpoints.health",
        ]
    )

    # Configuration
    config = providers.Singleton(get_settings)

    # External Services
    postmark_email_sender = providers.Singleton(
        PostmarkEmailSender,
        api_key=config.provided.postmark_api_key,
        from_address=config.provided.email_from_address,
        base_url=config.provided.postmark_base_url,
    )
    console_email_sender = providers.Singleton(
        ConsoleEmailSender,
        from_address=config.provided.email_from_address,
    )

    # EMAIL_PROVIDER picks the implementation bound to the email port
    email_sender = providers.Selector(
        config.provided.email_provider,
        postmark=postmark_email_sender,
        console=console_email_sender,
    )

    # Command handlers (nested container)
    commands = providers.Container(
        Commands,
        email_sender=email_sender,
    )
