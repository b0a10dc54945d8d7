from __future__ import annotations

from pydantic import BaseModel, Field

from camres.common.enums import SensorFacing


class SensorInfo(BaseModel):
    """Static description of an image sensor.

    Normally read from the device's camera descriptor by the caller.
    """

    facing: SensorFacing = SensorFacing.BACK
    orientation: int = Field(
        90, ge=0, lt=360, description="Clockwise angle the sensor is mounted at (degrees)"
    )

    @property
    def faces_front(self) -> bool:
        return self.facing is SensorFacing.FRONT
