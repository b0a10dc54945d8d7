"""Display orientation correction for camera previews."""

from __future__ import annotations

from camres.common.enums import ScreenRotation
from camres.models import SensorInfo


def display_orientation(
    screen_rotation: ScreenRotation | int,
    sensor_orientation: int,
    sensor_faces_front: bool,
) -> int:
    """Return the clockwise rotation to apply to the preview, in [0, 360).

    Front-facing sensors are mirrored, so their correction runs the other
    way round.

    Args:
        screen_rotation: Current screen rotation (enum or 0/90/180/270)
        sensor_orientation: Sensor mounting angle in degrees
        sensor_faces_front: Whether the sensor points towards the user

    Raises:
        InvalidRotationError: If *screen_rotation* is not a right angle rotation
    """
    degree = ScreenRotation.from_value(screen_rotation).degrees
    if sensor_faces_front:
        result = (sensor_orientation + degree) % 360
        return (360 - result) % 360
    return (sensor_orientation - degree + 360) % 360


class OrientationCalculator:
    """Orientation helpers working from a :class:`SensorInfo`."""

    @staticmethod
    def for_sensor(screen_rotation: ScreenRotation | int, sensor: SensorInfo) -> int:
        """Return the display orientation for *sensor* at *screen_rotation*."""
        return display_orientation(screen_rotation, sensor.orientation, sensor.faces_front)
