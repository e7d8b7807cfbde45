"""Convert commands: build a color from one model and print its HSBK encoding."""

from typing import Optional

import click

from lifxcolor.cli.output import build_color, echo_color, get_config
from lifxcolor.models import Color, Hsbk

# Negative hues are valid input; don't parse "-10" as an option
_COMMAND_SETTINGS = {"ignore_unknown_options": True}

format_option = click.option(
    '--format',
    '-f',
    'output_format',
    type=click.Choice(['text', 'json'], case_sensitive=False),
    default=None,
    help='Output format (default: from config)'
)

kelvin_option = click.option(
    '--kelvin',
    '-k',
    type=int,
    default=None,
    help='Kelvin for the resulting color (default: from config)'
)


def _emit(ctx: click.Context, color: Color, kelvin: Optional[int], output_format: Optional[str]) -> None:
    config = get_config(ctx)
    if kelvin is None:
        kelvin = config.default_kelvin
    color = build_color(color.with_kelvin, kelvin)
    echo_color(color, (output_format or config.output_format).lower())


@click.group()
def convert():
    """Convert a color to HSBK and its wire encoding."""
    pass


@convert.command('rgb', context_settings=_COMMAND_SETTINGS)
@click.argument('r', type=click.IntRange(0, 255))
@click.argument('g', type=click.IntRange(0, 255))
@click.argument('b', type=click.IntRange(0, 255))
@kelvin_option
@format_option
@click.pass_context
def convert_rgb(ctx, r: int, g: int, b: int, kelvin: Optional[int], output_format: Optional[str]):
    """Convert 8-bit RGB (0-255 per channel)."""
    _emit(ctx, build_color(Color.rgb, r, g, b), kelvin, output_format)


@convert.command('hsb', context_settings=_COMMAND_SETTINGS)
@click.argument('hue', type=float)
@click.argument('saturation', type=float)
@click.argument('brightness', type=float)
@kelvin_option
@format_option
@click.pass_context
def convert_hsb(ctx, hue: float, saturation: float, brightness: float,
                kelvin: Optional[int], output_format: Optional[str]):
    """Convert HSB/HSV (hue in degrees, saturation and brightness 0-1)."""
    _emit(ctx, build_color(Color.hsb, hue, saturation, brightness), kelvin, output_format)


@convert.command('hsl', context_settings=_COMMAND_SETTINGS)
@click.argument('hue', type=float)
@click.argument('saturation', type=float)
@click.argument('luminance', type=float)
@kelvin_option
@format_option
@click.pass_context
def convert_hsl(ctx, hue: float, saturation: float, luminance: float,
                kelvin: Optional[int], output_format: Optional[str]):
    """Convert HSL (hue in degrees, saturation and luminance 0-1)."""
    _emit(ctx, build_color(Color.hsl, hue, saturation, luminance), kelvin, output_format)


@convert.command('hsbk', context_settings=_COMMAND_SETTINGS)
@click.argument('hue', type=float)
@click.argument('saturation', type=float)
@click.argument('brightness', type=float)
@click.argument('kelvin', type=int)
@format_option
@click.pass_context
def convert_hsbk(ctx, hue: float, saturation: float, brightness: float, kelvin: int,
                 output_format: Optional[str]):
    """Convert HSBK (kelvin given explicitly)."""
    _emit(ctx, build_color(Color.hsbk, hue, saturation, brightness, kelvin), kelvin, output_format)


@convert.command('white')
@click.option('--brightness', '-b', type=float, default=1.0, help='Brightness 0-1 (default: 1.0)')
@kelvin_option
@format_option
@click.pass_context
def convert_white(ctx, brightness: float, kelvin: Optional[int], output_format: Optional[str]):
    """Convert a white at the given brightness and kelvin."""
    _emit(ctx, build_color(Color.white, brightness), kelvin, output_format)


@convert.command('wire')
@click.argument('hue', type=click.IntRange(0, 65535))
@click.argument('saturation', type=click.IntRange(0, 65535))
@click.argument('brightness', type=click.IntRange(0, 65535))
@click.argument('kelvin', type=click.IntRange(0, 65535))
@format_option
@click.pass_context
def convert_wire(ctx, hue: int, saturation: int, brightness: int, kelvin: int,
                 output_format: Optional[str]):
    """Decode a wire HSBK record (four 0-65535 integers)."""
    wire = Hsbk(hue=hue, saturation=saturation, brightness=brightness, kelvin=kelvin)
    _emit(ctx, Color.from_wire(wire), kelvin, output_format)
