"""Exception classes for resolution and orientation selection.

Every error raised by the selection functions derives from
:class:`SelectionError`, so callers that only want to fall back to a
hardware default can catch the base class.
"""

from __future__ import annotations

from typing import Any


class SelectionError(Exception):
    """Base class for errors raised while selecting a size or orientation."""

    def __init__(self, message: str) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
        """
        super().__init__(message)
        self.message: str = message


class EmptyInputError(SelectionError):
    """Raised when an operation that needs at least one candidate gets none."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} requires at least one candidate size")
        self.operation = operation


class InvalidTargetError(SelectionError):
    """Raised when the target resolution cannot produce an aspect ratio."""

    def __init__(self, target: Any) -> None:
        """Initialize with the rejected target.

        Args:
            target: The target point whose height is not positive
        """
        super().__init__(f"Target resolution must have a positive height, got {target}")
        self.target = target


class InvalidRotationError(SelectionError):
    """Raised for a screen rotation outside 0, 90, 180 and 270 degrees."""

    def __init__(self, rotation: Any) -> None:
        super().__init__(
            f"Unsupported screen rotation {rotation!r}; expected one of 0, 90, 180, 270"
        )
        self.rotation = rotation
