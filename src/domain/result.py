"""Outcome values returned by command handlers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Result:
    """Outcome of a business operation.

    Returned by the operation that triggered a notification, not by the
    notification send itself. Failures are raised as domain exceptions, so
    a returned result always reports success.
    """

    succeeded: bool
    """Whether the operation completed"""

    @classmethod
    def success(cls) -> Result:
        """Create a successful result."""
        return cls(succeeded=True)
