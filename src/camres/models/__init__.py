"""Value types exchanged with the selection functions.

This module provides :class:`Size`, an immutable candidate capture
resolution, :class:`Point`, the mutable pair returned by best-fit, and
:class:`SensorInfo`, the sensor description used for orientation.
"""

from camres.models.sensor import SensorInfo
from camres.models.size import Point, Size, SizeLike

__all__ = ["Point", "SensorInfo", "Size", "SizeLike"]
