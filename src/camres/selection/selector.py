from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from camres.models import Point, Size, SizeLike
from camres.selection.orientation import OrientationCalculator
from camres.selection.sizes import SizeSelector
from camres.settings import SelectorSettings


class ResolutionSelector:
    """Applies the selection rules with defaults taken from settings.

    The selector only reads its settings, so one instance can be shared
    between threads.

    Examples:
        selector = ResolutionSelector(SelectorSettings.load())
        preview = selector.best_fit(camera.supported_preview_sizes())
        rotation = selector.display_orientation()
    """

    def __init__(self, settings: SelectorSettings | None = None) -> None:
        self.settings = settings or SelectorSettings()

    def _candidates(self, sizes: Optional[Iterable[SizeLike]]) -> list[Size]:
        if sizes is None:
            return self.settings.sizes()
        return [Size.coerce(s) for s in sizes]

    def max_size(self, sizes: Optional[Iterable[SizeLike]] = None) -> Size:
        return SizeSelector.max_size(self._candidates(sizes))

    def ratio_match(
        self, sizes: Optional[Iterable[SizeLike]] = None, target_ratio: float | None = None
    ) -> Size:
        ratio = self.settings.target_ratio if target_ratio is None else target_ratio
        return SizeSelector.ratio_match(self._candidates(sizes), ratio)

    def min_bound(self, sizes: Optional[Iterable[SizeLike]] = None) -> Optional[Size]:
        return SizeSelector.min_bound(
            self._candidates(sizes), self.settings.min_width, self.settings.min_height
        )

    def best_fit(
        self,
        sizes: Optional[Iterable[SizeLike]] = None,
        target: Point | SizeLike | None = None,
    ) -> Point:
        """Best-fit against the configured target, mode and distortion."""
        return SizeSelector.best_fit(
            self._candidates(sizes),
            target if target is not None else self.settings.target,
            self.settings.high_res_mode,
            self.settings.max_distortion,
        )

    def display_orientation(self, screen_rotation: int | None = None) -> int:
        """Orientation correction for the configured sensor."""
        rotation = self.settings.screen_rotation if screen_rotation is None else screen_rotation
        return OrientationCalculator.for_sensor(rotation, self.settings.sensor)
