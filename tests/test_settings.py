import os
import subprocess
import sys
from pathlib import Path

import pytest

from camres.common.enums import ScreenRotation, SensorFacing
from camres.models import Point, Size
from camres.settings import SelectorSettings

SAMPLE_CONFIG = Path(__file__).resolve().parents[1] / "config-sample.yaml"


def test_defaults() -> None:
    cfg = SelectorSettings()
    assert cfg.target == Point(x=1080, y=1920)
    assert cfg.high_res_mode is False
    assert cfg.max_distortion == 0.15
    assert cfg.rotation is ScreenRotation.ROTATION_0
    assert cfg.sensor.facing is SensorFacing.BACK
    assert cfg.sizes() == []


def test_load_sample_config() -> None:
    cfg = SelectorSettings.load(SAMPLE_CONFIG)
    assert cfg.sizes()[0] == Size(width=3264, height=2448)
    assert cfg.min_width == 1280
    assert cfg.sensor.orientation == 90


def test_load_interpolates_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCREEN_HEIGHT", "2400")
    path = tmp_path / "camres.yaml"
    path.write_text("target_width: 1080\ntarget_height: ${SCREEN_HEIGHT}\nsensor_facing: front\n")
    cfg = SelectorSettings.load(path)
    assert cfg.target == Point(x=1080, y=2400)
    assert cfg.sensor.faces_front is True


def test_load_from_env_var(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "custom.yaml"
    path.write_text("screen_rotation: 270\n")
    monkeypatch.setenv("CAMRES_CONFIG", str(path))
    assert SelectorSettings.load().rotation is ScreenRotation.ROTATION_270


def test_env_var_missing_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CAMRES_CONFIG", str(tmp_path / "absent.yaml"))
    with pytest.raises(FileNotFoundError):
        SelectorSettings.load()


def test_no_config_found(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CAMRES_CONFIG", raising=False)
    monkeypatch.setattr(SelectorSettings, "DEFAULT_CONFIG_PATHS", [tmp_path / "camres.yaml"])
    with pytest.raises(FileNotFoundError):
        SelectorSettings.load()


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "camres.yaml"
    path.write_text("")
    assert SelectorSettings.load(path) == SelectorSettings()


@pytest.mark.parametrize(
    "content",
    [
        "screen_rotation: 45\n",
        "supported_sizes: ['1920 by 1080']\n",
        "max_distortion: -0.1\n",
        "target_height: 0\n",
        "sensor_facing: sideways\n",
        "target_width: [unclosed\n",
    ],
)
def test_invalid_config_raises_runtime_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "camres.yaml"
    path.write_text(content)
    with pytest.raises(RuntimeError):
        SelectorSettings.load(path)


def test_dotenv_loaded_by_load_not_by_import(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    # Set then delete so monkeypatch removes whatever load() adds
    monkeypatch.setenv("CAMRES_TEST_HEIGHT", "0")
    monkeypatch.delenv("CAMRES_TEST_HEIGHT")
    (tmp_path / ".env").write_text("CAMRES_TEST_HEIGHT=2400\n")
    monkeypatch.chdir(tmp_path)

    imported = subprocess.run(
        [
            sys.executable,
            "-c",
            "import os, camres; print(os.environ.get('CAMRES_TEST_HEIGHT', 'unset'))",
        ],
        capture_output=True,
        text=True,
        check=True,
    )
    assert imported.stdout.strip() == "unset"
    assert "CAMRES_TEST_HEIGHT" not in os.environ

    path = tmp_path / "camres.yaml"
    path.write_text("target_height: ${CAMRES_TEST_HEIGHT}\n")
    assert SelectorSettings.load(path).target == Point(x=1080, y=2400)
