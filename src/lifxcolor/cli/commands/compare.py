"""Compare command: approximate equality of two HSB colors."""

import click

from lifxcolor.cli.output import build_color
from lifxcolor.models import EQUALITY_THRESHOLD, Color


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument('hue1', type=float)
@click.argument('saturation1', type=float)
@click.argument('brightness1', type=float)
@click.argument('hue2', type=float)
@click.argument('saturation2', type=float)
@click.argument('brightness2', type=float)
@click.option(
    '--threshold',
    '-t',
    type=click.FloatRange(min=0.0),
    default=EQUALITY_THRESHOLD,
    show_default=True,
    help='Allowed variance as a fraction (hue tolerance is threshold * 360 degrees)'
)
@click.pass_context
def compare(ctx, hue1: float, saturation1: float, brightness1: float,
            hue2: float, saturation2: float, brightness2: float, threshold: float):
    """
    Compare two HSB colors; exits with status 1 when they differ.

    Kelvin is never compared.

    \b
    Examples:
      lifxcolor compare 120 1 1 120.2 1 1
      lifxcolor compare -10 0.5 0.5 350 0.5 0.5
    """
    first = build_color(Color.hsb, hue1, saturation1, brightness1)
    second = build_color(Color.hsb, hue2, saturation2, brightness2)

    if first.similar_to(second, threshold=threshold):
        click.echo("equal")
    else:
        click.echo("different")
        ctx.exit(1)
