"""Camera resolution and display orientation selection."""

from camres.common.enums import ScreenRotation, SensorFacing
from camres.models import Point, Size
from camres.selection import (
    EmptyInputError,
    InvalidRotationError,
    InvalidTargetError,
    OrientationCalculator,
    ResolutionSelector,
    SelectionError,
    SensorInfo,
    SizeSelector,
    display_orientation,
    find_best_fit,
    find_max_size,
    find_min_bound,
    find_ratio_match,
)

__all__ = [
    "EmptyInputError",
    "InvalidRotationError",
    "InvalidTargetError",
    "OrientationCalculator",
    "Point",
    "ResolutionSelector",
    "ScreenRotation",
    "SelectionError",
    "SensorFacing",
    "SensorInfo",
    "Size",
    "SizeSelector",
    "display_orientation",
    "find_best_fit",
    "find_max_size",
    "find_min_bound",
    "find_ratio_match",
]
