"""Command handler contract.

A command handler receives one command object and returns one result. The
presentation layer resolves handlers from the container and never constructs
their collaborators itself.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

TCommand = TypeVar("TCommand")
TResult = TypeVar("TResult")


class ICommandHandler(ABC, Generic[TCommand, TResult]):
    """Base interface for handlers of write-side commands.

    Type Parameters:
        TCommand: Command type accepted by the handler
        TResult: Result type returned by the handler
    """

    @abstractmethod
    async def handle(self, command: TCommand) -> TResult:
        """Handle a command.

        Args:
            command: The command to process

        Returns:
            The outcome of the operation
        """
