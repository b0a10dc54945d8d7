"""Capture size selection.

Each operation copies its candidates into a local list before sorting, so
the caller's collection is never reordered and concurrent calls share no
state. Sorting is stable: candidates that compare equal keep their input
order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Final, Optional

from camres.constants import DEFAULT_MAX_DISTORTION, default_resolution, pixel_floor
from camres.errors import EmptyInputError, InvalidTargetError
from camres.models import Point, Size, SizeLike

logger: Final = logging.getLogger(__name__)


def _by_pixels(size: Size) -> int:
    return size.pixels


def _by_width(size: Size) -> int:
    return size.width


def _sorted_desc(sizes: Iterable[SizeLike], key: Callable[[Size], int]) -> list[Size]:
    return sorted((Size.coerce(s) for s in sizes), key=key, reverse=True)


class SizeSelector:
    """Pure selection rules over a list of candidate capture sizes."""

    @staticmethod
    def max_size(sizes: Iterable[SizeLike]) -> Size:
        """Return the candidate with the greatest pixel count.

        Ties go to the candidate that appears first in *sizes*.

        Raises:
            EmptyInputError: If *sizes* is empty
        """
        ordered = _sorted_desc(sizes, _by_pixels)
        if not ordered:
            raise EmptyInputError("max_size")
        return ordered[0]

    @staticmethod
    def ratio_match(sizes: Iterable[SizeLike], target_ratio: float) -> Size:
        """Return the candidate whose width/height is closest to *target_ratio*.

        Candidates are scanned widest first and the first one with the
        smallest delta wins, so exact ties go to the wider size. A
        *target_ratio* of zero or less ignores the ratio and returns the
        widest candidate.

        Args:
            sizes: Candidate sizes
            target_ratio: Desired width / height

        Returns:
            The selected size

        Raises:
            EmptyInputError: If *sizes* is empty
        """
        ordered = _sorted_desc(sizes, _by_width)
        if not ordered:
            raise EmptyInputError("ratio_match")
        if target_ratio <= 0:
            return ordered[0]

        best = ordered[0]
        best_delta = abs(best.aspect_ratio - target_ratio)
        for size in ordered[1:]:
            delta = abs(size.aspect_ratio - target_ratio)
            if delta < best_delta:
                best, best_delta = size, delta
        logger.debug("Ratio %.4f matched %s (delta %.4f)", target_ratio, best, best_delta)
        return best

    @staticmethod
    def min_bound(sizes: Iterable[SizeLike], min_width: int, min_height: int) -> Optional[Size]:
        """Return the widest candidate at least *min_width* x *min_height*.

        Returns ``None`` when no candidate qualifies, including when *sizes*
        is empty.
        """
        for size in _sorted_desc(sizes, _by_width):
            if size.width >= min_width and size.height >= min_height:
                return size
        return None

    @staticmethod
    def best_fit(
        sizes: Optional[Iterable[SizeLike]],
        target: Point | SizeLike,
        high_res_mode: bool = False,
        max_distortion: float = DEFAULT_MAX_DISTORTION,
    ) -> Point:
        """Find the capture size that best matches a target resolution.

        Candidates are visited from the largest pixel count down. Each one
        is dropped if it is below the pixel floor for the mode, or if its
        aspect ratio, compared in the target's orientation, differs from the
        target's by more than *max_distortion*. A candidate whose
        orientation-normalized dimensions equal the target is returned
        immediately in its original orientation. Otherwise the largest
        remaining candidate wins; if every candidate was dropped, the largest
        input candidate is returned; with no candidates at all, the
        hard-coded default for the mode.

        Args:
            sizes: Candidate sizes, or None
            target: Screen or output resolution to match
            high_res_mode: Use the still-capture floor and default
            max_distortion: Largest accepted aspect ratio difference

        Returns:
            The selected resolution as a new Point

        Raises:
            InvalidTargetError: If the target height is not positive
        """
        fallback = default_resolution(high_res_mode)
        if sizes is None:
            return fallback
        ordered = _sorted_desc(sizes, _by_pixels)
        if not ordered:
            return fallback
        fallback = Point.from_size(ordered[0])

        goal = Point.coerce(target)
        if goal.y <= 0:
            raise InvalidTargetError(goal)
        screen_ratio = goal.x / goal.y
        floor = pixel_floor(high_res_mode)

        survivors: list[Size] = []
        for size in ordered:
            if size.pixels < floor:
                logger.debug("Dropping %s: below %d pixel floor", size, floor)
                continue

            # Sensors report landscape sizes; compare in the target's orientation
            normalized = size.rotated() if size.is_landscape else size
            distortion = abs(normalized.aspect_ratio - screen_ratio)
            if distortion > max_distortion:
                logger.debug("Dropping %s: distortion %.4f > %.4f", size, distortion, max_distortion)
                continue

            if normalized.as_tuple() == goal.as_tuple():
                logger.debug("Exact match %s for target %s", size, goal)
                return Point.from_size(size)
            survivors.append(size)

        if survivors:
            return Point.from_size(survivors[0])
        logger.debug("No candidate survived filtering; using %s", fallback)
        return fallback


def find_max_size(sizes: Iterable[SizeLike]) -> Size:
    """Return the candidate with the greatest pixel count."""
    return SizeSelector.max_size(sizes)


def find_ratio_match(sizes: Iterable[SizeLike], target_ratio: float) -> Size:
    """Return the candidate closest to *target_ratio*."""
    return SizeSelector.ratio_match(sizes, target_ratio)


def find_min_bound(sizes: Iterable[SizeLike], min_width: int, min_height: int) -> Optional[Size]:
    """Return the widest candidate meeting the minimum bounds, or None."""
    return SizeSelector.min_bound(sizes, min_width, min_height)


def find_best_fit(
    sizes: Optional[Iterable[SizeLike]],
    target: Point | SizeLike,
    high_res_mode: bool = False,
    max_distortion: float = DEFAULT_MAX_DISTORTION,
) -> Point:
    """Return the capture size that best matches *target*."""
    return SizeSelector.best_fit(sizes, target, high_res_mode, max_distortion)
