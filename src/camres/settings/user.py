"""User-configurable selection settings loaded from camres.yaml."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import ClassVar

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from camres.common.enums import ScreenRotation, SensorFacing
from camres.constants import DEFAULT_MAX_DISTORTION
from camres.models import Point, SensorInfo, Size


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class SelectorSettings(BaseModel):
    """Defaults for resolution and orientation selection.

    Default values describe a rear camera on a 1080x1920 portrait screen
    selecting a preview size.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("camres.yaml"),
        Path("~/.config/camres/camres.yaml").expanduser(),
        Path("/etc/camres/camres.yaml"),
    ]

    # Target output
    target_width: int = Field(1080, gt=0, description="Width of the screen or output in pixels")
    target_height: int = Field(1920, gt=0, description="Height of the screen or output in pixels")
    target_ratio: float = Field(
        0.0, description="Preferred width/height for ratio matching; <= 0 ignores the ratio"
    )
    min_width: int = Field(0, ge=0, description="Minimum width for bounded selection")
    min_height: int = Field(0, ge=0, description="Minimum height for bounded selection")

    # Best-fit behaviour
    high_res_mode: bool = Field(
        False, description="Select still-capture sizes (higher pixel floor and default)"
    )
    max_distortion: float = Field(
        DEFAULT_MAX_DISTORTION,
        ge=0.0,
        description="Largest accepted aspect ratio difference from the target",
    )

    # Sensor and screen
    sensor_facing: SensorFacing = SensorFacing.BACK
    sensor_orientation: int = Field(90, ge=0, lt=360, description="Sensor mounting angle")
    screen_rotation: int = Field(0, description="Screen rotation in degrees (0/90/180/270)")

    supported_sizes: list[str] = Field(
        default_factory=list, description='Candidate sizes as "WIDTHxHEIGHT" strings'
    )

    # ---- validators ----
    @field_validator("screen_rotation")
    @classmethod
    def validate_rotation(cls, v: int) -> int:
        if v not in {r.value for r in ScreenRotation}:
            raise ValueError("screen_rotation must be one of 0, 90, 180, 270")
        return v

    @field_validator("supported_sizes")
    @classmethod
    def validate_sizes(cls, v: list[str]) -> list[str]:
        for text in v:
            try:
                Size.parse(text)
            except ValidationError as err:
                raise ValueError(f"invalid size {text!r}") from err
        return v

    # ---- convenience methods ----
    @property
    def target(self) -> Point:
        """Target resolution as a new Point."""
        return Point(x=self.target_width, y=self.target_height)

    @property
    def sensor(self) -> SensorInfo:
        return SensorInfo(facing=self.sensor_facing, orientation=self.sensor_orientation)

    @property
    def rotation(self) -> ScreenRotation:
        return ScreenRotation(self.screen_rotation)

    def sizes(self) -> list[Size]:
        """Return the configured candidate sizes."""
        return [Size.parse(text) for text in self.supported_sizes]

    @classmethod
    def load(cls, path: Path | None = None) -> SelectorSettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated SelectorSettings object

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        # Load environment variables from the working directory's .env file(s)
        load_dotenv(find_dotenv(usecwd=True))

        if path is None:
            # Check environment variable first
            env_path = os.environ.get("CAMRES_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(f"Config file from CAMRES_CONFIG not found: {path}")
            else:
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    raise FileNotFoundError(
                        "No configuration file found. Create camres.yaml or set CAMRES_CONFIG."
                    )

        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
