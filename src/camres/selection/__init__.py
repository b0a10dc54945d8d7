"""Resolution and orientation selection."""

from camres.errors import (
    EmptyInputError,
    InvalidRotationError,
    InvalidTargetError,
    SelectionError,
)
from camres.models import SensorInfo
from camres.selection.orientation import OrientationCalculator, display_orientation
from camres.selection.selector import ResolutionSelector
from camres.selection.sizes import (
    SizeSelector,
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
    "ResolutionSelector",
    "SelectionError",
    "SensorInfo",
    "SizeSelector",
    "display_orientation",
    "find_best_fit",
    "find_max_size",
    "find_min_bound",
    "find_ratio_match",
]
