import pytest
from pydantic import ValidationError

from camres.common.enums import SensorFacing
from camres.models import Point, SensorInfo, Size


@pytest.mark.parametrize(
    "value",
    [
        Size(width=1920, height=1080),
        (1920, 1080),
        [1920, 1080],
        "1920x1080",
        " 1920 X 1080 ",
        {"width": 1920, "height": 1080},
    ],
)
def test_size_coerce(value: object) -> None:
    assert Size.coerce(value) == Size(width=1920, height=1080)  # type: ignore[arg-type]


@pytest.mark.parametrize("value", [(0, 1080), (1920, -1), "1920-1080", "wide", (1, 2, 3)])
def test_size_rejects_invalid(value: object) -> None:
    with pytest.raises(ValidationError):
        Size.coerce(value)  # type: ignore[arg-type]


def test_size_properties() -> None:
    size = Size(width=1920, height=1080)
    assert size.pixels == 2_073_600
    assert size.aspect_ratio == pytest.approx(16 / 9)
    assert size.is_landscape is True
    assert size.rotated() == Size(width=1080, height=1920)
    assert size.rotated().is_landscape is False
    assert str(size) == "1920x1080"


def test_size_is_immutable_and_hashable() -> None:
    size = Size(width=640, height=480)
    with pytest.raises(ValidationError):
        size.width = 800  # type: ignore[misc]
    assert len({size, Size(width=640, height=480)}) == 1


def test_point_is_mutable() -> None:
    point = Point.from_size(Size(width=1920, height=1080))
    point.x = 1080
    point.y = 1920
    assert point.as_tuple() == (1080, 1920)
    assert str(point) == "1080x1920"


@pytest.mark.parametrize(
    "value",
    [Point(x=1080, y=1920), Size(width=1080, height=1920), (1080, 1920), "1080x1920"],
)
def test_point_coerce(value: object) -> None:
    assert Point.coerce(value) == Point(x=1080, y=1920)  # type: ignore[arg-type]


def test_point_allows_zero_height() -> None:
    assert Point.coerce("1080x0").y == 0


def test_sensor_info() -> None:
    assert SensorInfo().faces_front is False
    assert SensorInfo(facing="front").faces_front is True  # type: ignore[arg-type]
    assert SensorInfo(facing=SensorFacing.FRONT, orientation=270).orientation == 270
    with pytest.raises(ValidationError):
        SensorInfo(orientation=360)
