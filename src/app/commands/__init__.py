"""Application commands and their handlers."""

from src.app.commands.base import ICommandHandler
from src.app.commands.register_user import RegisterUserCommand, RegisterUserCommandHandler


__all__ = ["ICommandHandler", "RegisterUserCommand", "RegisterUserCommandHandler"]
