"""Named color preset command."""

from typing import Optional

import click

from lifxcolor.cli.output import build_color, echo_color, fail, get_config
from lifxcolor.colors import NAMED_HUES, named as named_color
from lifxcolor.exceptions import UnknownColorError


@click.command()
@click.argument('name', required=False)
@click.option('--saturation', '-s', type=float, default=1.0, help='Saturation 0-1 (default: 1.0)')
@click.option('--brightness', '-b', type=float, default=1.0, help='Brightness 0-1 (default: 1.0)')
@click.option('--kelvin', '-k', type=int, default=None, help='Kelvin (default: from config)')
@click.option(
    '--format',
    '-f',
    'output_format',
    type=click.Choice(['text', 'json'], case_sensitive=False),
    default=None,
    help='Output format (default: from config)'
)
@click.pass_context
def named(ctx, name: Optional[str], saturation: float, brightness: float,
          kelvin: Optional[int], output_format: Optional[str]):
    """
    Show a named color preset, or list presets when NAME is omitted.

    \b
    Examples:
      lifxcolor named
      lifxcolor named orange --brightness 0.5
      lifxcolor named white --kelvin 2700
    """
    config = get_config(ctx)

    if name is None:
        for preset, hue in NAMED_HUES.items():
            click.echo(f"{preset:<8} {hue:>5.1f}")
        click.echo(f"{'white':<8}   n/a")
        return

    if kelvin is None:
        kelvin = config.default_kelvin

    try:
        color = build_color(named_color, name, saturation, brightness, kelvin)
    except UnknownColorError as e:
        fail(e)

    echo_color(color, (output_format or config.output_format).lower())
