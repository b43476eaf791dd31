"""Error response schemas."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Error detail schema."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: Any | None = Field(None, description="Additional error details")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "code": "NOTIFICATION_DELIVERY_FAILED",
                    "message": "Email provider returned 422",
                    "details": {
                        "provider": "postmark",
                        "status_code": 422,
                        "error_code": 300,
                        "message": "Invalid 'To' address",
                    },
                },
                {
                    "code": "VALIDATION_ERROR",
                    "message": "Request validation failed",
                    "details": [
                        {
                            "loc": ["body", "email"],
                            "msg": "value is not a valid email address",
                            "type": "value_error",
                        }
                    ],
                },
            ]
        }
    }


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: ErrorDetail = Field(..., description="Error information")
