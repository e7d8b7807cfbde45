"""Shared output helpers for CLI commands."""

import json
import logging
import sys
from pathlib import Path
from typing import Callable, NoReturn

import click
from pydantic import ValidationError

from lifxcolor.exceptions import ConfigError, LifxColorError, wrap_color_error
from lifxcolor.models import AppConfig, Color

logger = logging.getLogger(__name__)


def get_config(ctx: click.Context) -> AppConfig:
    """Load the config selected by the top-level --config option."""
    path: Path | None = ctx.obj.get("config_path") if ctx.obj else None
    try:
        return AppConfig.load(path)
    except (ConfigError, OSError) as e:
        fail(e)


def build_color(factory: Callable[..., Color], *args) -> Color:
    """Call a Color constructor, reporting invalid components to the user."""
    try:
        return factory(*args)
    except ValidationError as e:
        fail(wrap_color_error(e))


def fail(error: Exception) -> NoReturn:
    """Print a user-friendly error with its recovery hint and exit with status 1."""
    logger.error(f"Command failed: {error!r}")

    if isinstance(error, LifxColorError):
        click.echo(f"ERROR: {error.message}", err=True)
        if error.hint:
            click.echo(f"\n{error.hint}", err=True)
    else:
        click.echo(f"ERROR: {type(error).__name__}: {error}", err=True)
    sys.exit(1)


def echo_color(color: Color, output_format: str) -> None:
    """Print a color together with its wire encoding."""
    wire = color.to_wire()

    if output_format == "json":
        payload = {
            "color": color.model_dump(),
            "hex": color.to_hex(),
            "wire": wire.model_dump(),
            "bytes": wire.to_bytes().hex(),
        }
        click.echo(json.dumps(payload, indent=2))
        return

    click.echo(
        f"Color: hue={color.hue:.2f} saturation={color.saturation:.3f} "
        f"brightness={color.brightness:.3f} kelvin={color.kelvin}"
    )
    click.echo(f"Hex:   {color.to_hex()}")
    click.echo(
        f"Wire:  hue={wire.hue} saturation={wire.saturation} "
        f"brightness={wire.brightness} kelvin={wire.kelvin}"
    )
    click.echo(f"Bytes: {wire.to_bytes().hex()}")
