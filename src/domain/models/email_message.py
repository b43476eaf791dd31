"""Email message value object."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from src.domain.exceptions import ValidationError


class EmailMessage(BaseModel):
    """A single outbound email.

    Built at call time and discarded once the provider call returns. It has
    no identity beyond the call that created it.
    """

    model_config = ConfigDict(frozen=True)

    to: str = Field(..., description="Recipient email address")
    subject: str = Field(..., description="Subject line")
    body: str = Field(..., description="Plain-text body")

    @field_validator("to", "subject", "body")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only fields."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @classmethod
    def create(cls, to: str, subject: str, body: str) -> "EmailMessage":
        """Build a message, raising a domain ValidationError on bad input.

        Args:
            to: Recipient email address
            subject: Email subject line
            body: Email body content

        Returns:
            The immutable message

        Raises:
            ValidationError: If any field is empty or whitespace-only
        """
        try:
            return cls(to=to, subject=subject, body=body)
        except PydanticValidationError as e:
            fields = [str(err["loc"][0]) for err in e.errors()]
            raise ValidationError(
                f"Invalid email message: {', '.join(fields)} must not be blank",
                details={"fields": fields},
            ) from e
