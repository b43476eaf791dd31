"""Domain models."""

from src.domain.models.email_message import EmailMessage


__all__ = ["EmailMessage"]
