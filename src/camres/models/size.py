from __future__ import annotations

import re
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, model_validator

_SIZE_PATTERN = re.compile(r"^\s*(\d+)\s*[xX×]\s*(\d+)\s*$")


class Size(BaseModel):
    """A capture resolution supported by an imaging device.

    Sizes have no identity of their own; two sizes with the same width and
    height compare equal and hash the same.

    Examples:
        Size(width=1920, height=1080)
        Size.coerce((1920, 1080))
        Size.coerce("1920x1080")
    """

    model_config = ConfigDict(frozen=True)

    width: PositiveInt = Field(..., description="Width in pixels")
    height: PositiveInt = Field(..., description="Height in pixels")

    @model_validator(mode="before")
    @classmethod
    def _accept_pairs(cls, data: Any) -> Any:
        if isinstance(data, str):
            return cls.parse_pair(data)
        if isinstance(data, (tuple, list)) and len(data) == 2:
            return {"width": data[0], "height": data[1]}
        return data

    @staticmethod
    def parse_pair(text: str) -> dict[str, int]:
        """Split a ``"WIDTHxHEIGHT"`` string into width and height."""
        match = _SIZE_PATTERN.match(text)
        if not match:
            raise ValueError(f"Expected WIDTHxHEIGHT, got {text!r}")
        return {"width": int(match.group(1)), "height": int(match.group(2))}

    @classmethod
    def coerce(cls, value: SizeLike) -> Size:
        """Build a Size from a Size, a (width, height) pair or a "WxH" string."""
        if isinstance(value, cls):
            return value
        return cls.model_validate(value)

    @classmethod
    def parse(cls, text: str) -> Size:
        """Parse a ``"1920x1080"`` style string."""
        return cls.model_validate(text)

    @property
    def pixels(self) -> int:
        """Total pixel count (width x height)."""
        return self.width * self.height

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def is_landscape(self) -> bool:
        """Whether the size is wider than it is tall."""
        return self.width > self.height

    def rotated(self) -> Size:
        """Return the same size with width and height swapped."""
        return Size(width=self.height, height=self.width)

    def as_tuple(self) -> tuple[int, int]:
        return (self.width, self.height)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


SizeLike = Union[Size, tuple[int, int], str]


class Point(BaseModel):
    """An (x, y) resolution, used for targets and best-fit results.

    Unlike :class:`Size`, both coordinates may be reassigned after creation.
    """

    model_config = ConfigDict(validate_assignment=True)

    x: int
    y: int

    @classmethod
    def from_size(cls, size: Size) -> Point:
        return cls(x=size.width, y=size.height)

    @classmethod
    def coerce(cls, value: Point | Size | tuple[int, int] | str) -> Point:
        """Build a Point from another Point, a Size, a pair or a "WxH" string."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Size):
            return cls.from_size(value)
        if isinstance(value, str):
            parts = Size.parse_pair(value)
            return cls(x=parts["width"], y=parts["height"])
        x, y = value
        return cls(x=x, y=y)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"{self.x}x{self.y}"
