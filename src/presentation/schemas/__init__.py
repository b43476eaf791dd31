"""API schemas."""

from src.presentation.schemas.error import ErrorDetail, ErrorResponse
from src.presentation.schemas.user import RegistrationResponse, UserRegister


__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "RegistrationResponse",
    "UserRegister",
]
