from __future__ import annotations

from enum import Enum

from camres.errors import InvalidRotationError


class ScreenRotation(Enum):
    """Rotation of the screen away from its natural orientation.

    Values are degrees, so ``ScreenRotation(90)`` is ``ROTATION_90``.
    """

    ROTATION_0 = 0
    ROTATION_90 = 90
    ROTATION_180 = 180
    ROTATION_270 = 270

    @property
    def degrees(self) -> int:
        return self.value

    @classmethod
    def from_value(cls, value: ScreenRotation | int) -> ScreenRotation:
        """Coerce an enum member or a degree count into a rotation.

        Raises:
            InvalidRotationError: If *value* is not one of the four rotations
        """
        if isinstance(value, cls):
            return value
        # bool is an int subclass; True/False are never rotations
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidRotationError(value)
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidRotationError(value) from exc


class SensorFacing(Enum):
    """Direction the image sensor points relative to the screen."""

    BACK = "back"  # away from the user
    FRONT = "front"  # towards the user (selfie camera)
