import pytest

from camres.errors import (
    EmptyInputError,
    InvalidRotationError,
    InvalidTargetError,
    SelectionError,
)
from camres.models import Point


@pytest.mark.parametrize(
    "err",
    [
        EmptyInputError("max_size"),
        InvalidTargetError(Point(x=1080, y=0)),
        InvalidRotationError(45),
    ],
)
def test_errors_share_base(err: SelectionError) -> None:
    assert isinstance(err, SelectionError)
    assert str(err) == err.message


def test_empty_input_error_names_operation() -> None:
    err = EmptyInputError("ratio_match")
    assert err.operation == "ratio_match"
    assert "ratio_match" in str(err)


def test_invalid_target_error_keeps_target() -> None:
    target = Point(x=1080, y=0)
    err = InvalidTargetError(target)
    assert err.target is target
    assert "1080x0" in str(err)


def test_invalid_rotation_error_keeps_rotation() -> None:
    err = InvalidRotationError(45)
    assert err.rotation == 45
    assert "45" in str(err)
