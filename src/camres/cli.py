"""Camera resolution selection CLI.

This module provides the command-line interface for picking capture sizes
and preview orientation from a list of supported sizes, either given on
the command line or read from a config file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final

import typer
from pydantic import ValidationError

from camres.constants import DEFAULT_MAX_DISTORTION
from camres.errors import SelectionError
from camres.models import Size
from camres.selection import ResolutionSelector, SizeSelector, display_orientation
from camres.settings import SelectorSettings

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Camera resolution selector", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "camres.cli"

SIZES_ARGUMENT = typer.Argument(..., help='Candidate sizes, e.g. "1920x1080 1280x720"')
CONFIG_OPTION = typer.Option(..., "--config", "-c", exists=True, dir_okay=False)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
RATIO_OPTION = typer.Option(0.0, "--ratio", "-r", help="Target width/height; <= 0 picks the widest")
MIN_WIDTH_OPTION = typer.Option(0, "--min-width", min=0, help="Minimum width in pixels")
MIN_HEIGHT_OPTION = typer.Option(0, "--min-height", min=0, help="Minimum height in pixels")
TARGET_OPTION = typer.Option(..., "--target", "-t", help='Screen resolution, e.g. "1080x1920"')
HIGH_RES_OPTION = typer.Option(False, "--high-res", help="Use still-capture floor and default")
MAX_DISTORTION_OPTION = typer.Option(
    DEFAULT_MAX_DISTORTION,
    "--max-distortion",
    "-d",
    help="Largest accepted aspect ratio difference",
)
ROTATION_OPTION = typer.Option(0, "--rotation", help="Screen rotation (0/90/180/270)")
SENSOR_ORIENTATION_OPTION = typer.Option(
    90, "--sensor-orientation", help="Sensor mounting angle in degrees"
)
FRONT_OPTION = typer.Option(False, "--front", help="Sensor faces the user")


def _fail(message: str) -> typer.Exit:
    typer.secho(message, fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


def _parse_sizes(values: list[str]) -> list[Size]:
    try:
        return [Size.parse(value) for value in values]
    except ValidationError as err:
        raise _fail(f"Invalid size: {err.errors()[0]['msg']}") from err


@app.callback()
def main(debug: bool = DEBUG_OPTION) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


@app.command("max-size")
def max_size(sizes: list[str] = SIZES_ARGUMENT) -> None:
    """Print the size with the most pixels."""
    try:
        result = SizeSelector.max_size(_parse_sizes(sizes))
    except SelectionError as exc:
        raise _fail(exc.message) from exc
    typer.echo(str(result))


@app.command("ratio")
def ratio(sizes: list[str] = SIZES_ARGUMENT, target_ratio: float = RATIO_OPTION) -> None:
    """Print the size whose aspect ratio is closest to --ratio."""
    try:
        result = SizeSelector.ratio_match(_parse_sizes(sizes), target_ratio)
    except SelectionError as exc:
        raise _fail(exc.message) from exc
    typer.echo(str(result))


@app.command("min-bound")
def min_bound(
    sizes: list[str] = SIZES_ARGUMENT,
    min_width: int = MIN_WIDTH_OPTION,
    min_height: int = MIN_HEIGHT_OPTION,
) -> None:
    """Print the widest size at least --min-width x --min-height."""
    result = SizeSelector.min_bound(_parse_sizes(sizes), min_width, min_height)
    if result is None:
        raise _fail(f"No size is at least {min_width}x{min_height}")
    typer.echo(str(result))


@app.command("best-fit")
def best_fit(
    sizes: list[str] = SIZES_ARGUMENT,
    target: str = TARGET_OPTION,
    high_res: bool = HIGH_RES_OPTION,
    max_distortion: float = MAX_DISTORTION_OPTION,
) -> None:
    """Print the capture size that best fits --target."""
    candidates = _parse_sizes(sizes)
    try:
        result = SizeSelector.best_fit(candidates, target, high_res, max_distortion)
    except ValueError as exc:
        raise _fail(f"Invalid target: {target}") from exc
    except SelectionError as exc:
        raise _fail(exc.message) from exc
    typer.echo(str(result))


@app.command("orientation")
def orientation(
    rotation: int = ROTATION_OPTION,
    sensor_orientation: int = SENSOR_ORIENTATION_OPTION,
    front: bool = FRONT_OPTION,
) -> None:
    """Print the preview rotation correction in degrees."""
    try:
        result = display_orientation(rotation, sensor_orientation, front)
    except SelectionError as exc:
        raise _fail(exc.message) from exc
    typer.echo(str(result))


@app.command("select")
def select(config: Path = CONFIG_OPTION) -> None:
    """Pick the best-fit size and orientation described by a config file."""
    try:
        settings = SelectorSettings.load(config)
    except RuntimeError as exc:
        raise _fail(str(exc)) from exc

    selector = ResolutionSelector(settings)
    try:
        size = selector.best_fit()
        degrees = selector.display_orientation()
    except SelectionError as exc:
        raise _fail(exc.message) from exc

    logger.debug("Selected %s rotated %d° for target %s", size, degrees, settings.target)
    typer.echo(f"size: {size}")
    typer.echo(f"orientation: {degrees}")


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        SelectorSettings.load(file)
        typer.echo("✅ Config valid")
    except RuntimeError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
