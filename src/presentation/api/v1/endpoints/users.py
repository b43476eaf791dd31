"""User API endpoints."""

from typing import Annotated

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status

from src.app.commands.register_user import RegisterUserCommand, RegisterUserCommandHandler
from src.container import Container
from src.presentation.schemas.error import ErrorResponse
from src.presentation.schemas.user import RegistrationResponse, UserRegister


router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "/register",
    response_model=RegistrationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register User",
    description="Register a user and send the welcome email",
    responses={
        status.HTTP_201_CREATED: {
            "description": "User registered and welcome email accepted by the provider",
            "model": RegistrationResponse,
        },
        status.HTTP_422_UNPROCESSABLE_CONTENT: {
            "description": "Invalid request data - missing or malformed email",
            "model": ErrorResponse,
        },
        status.HTTP_502_BAD_GATEWAY: {
            "description": "Email provider call failed",
            "model": ErrorResponse,
        },
    },
)
@inject
async def register_user(
    input: UserRegister,
    handler: Annotated[
        RegisterUserCommandHandler, Depends(Provide[Container.commands.register_user])
    ],
) -> RegistrationResponse:
    """Register a new user.

    The address is registered and emailed in the form ``EmailStr`` validated
    it to, with the domain part lowercased. Below this boundary it is passed
    on unchanged.

    Args:
        input: Registration data
        handler: Injected command handler

    Returns:
        Outcome of the registration command
    """
    result = await handler.handle(RegisterUserCommand(email=str(input.email)))
    return RegistrationResponse.from_result(result)
