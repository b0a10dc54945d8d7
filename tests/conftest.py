import pytest

from camres.models import Size


@pytest.fixture
def camera_sizes() -> list[Size]:
    """Preview sizes as a typical rear sensor reports them (landscape)."""
    return [
        Size(width=640, height=480),
        Size(width=1920, height=1080),
        Size(width=3264, height=2448),
        Size(width=1280, height=720),
        Size(width=1440, height=1080),
    ]
