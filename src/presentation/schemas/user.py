"""User registration request and response schemas."""

from pydantic import BaseModel, EmailStr, Field

from src.domain.result import Result


class UserRegister(BaseModel):
    """Request schema for registering a new user.

    ``EmailStr`` normalizes the address while validating it: the domain part
    is lowercased (``User@Example.COM`` becomes ``User@example.com``) and the
    local part keeps its case. The normalized form is what gets registered
    and emailed.
    """

    email: EmailStr = Field(
        ...,
        description=(
            "User email address (must be valid email format). "
            "The domain part is lowercased; the local part is kept as sent."
        ),
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"email": "user@example.com"},
            ]
        }
    }


class RegistrationResponse(BaseModel):
    """Outcome of a registration command."""

    succeeded: bool = Field(..., description="Whether the registration completed")

    @classmethod
    def from_result(cls, result: Result) -> "RegistrationResponse":
        """Build the response body from a command result."""
        return cls(succeeded=result.succeeded)
