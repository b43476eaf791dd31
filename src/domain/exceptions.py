"""Domain-specific exceptions for business logic errors.

This module defines the exception hierarchy for domain errors, providing
consistent error handling across the application layer.
"""

from typing import Any


class DomainException(Exception):
    """Base exception for all domain-related errors.

    Provides a consistent interface for domain exceptions with error codes
    and optional contextual details.

    Attributes:
        code: Machine-readable error code
        message: Human-readable error message
        details: Optional additional error context (dict or list)
    """

    code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | list[Any] | None = None) -> None:
        """Initialize domain exception.

        Args:
            message: Human-readable error description
            details: Optional additional context about the error
        """
        self.message = message
        self.details = details
        super().__init__(self.message)


class ValidationError(DomainException):
    """Raised when input data fails business validation rules.

    Use this exception for domain-level validation failures, such as
    an empty recipient address or a blank subject line.
    """

    code = "VALIDATION_ERROR"


class NotificationDeliveryError(DomainException):
    """Raised when the email provider call fails.

    Network errors, authentication errors and rejected recipients all surface
    as this one type. Provider context (HTTP status, provider error code) is
    carried in ``details``.
    """

    code = "NOTIFICATION_DELIVERY_FAILED"
