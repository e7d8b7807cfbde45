"""Named color presets.

Presets are fully saturated hues at the default kelvin. Use `COLORS` for
ready-made constants, or `named()` to build a preset with a custom
saturation, brightness or kelvin.

Example:
    ```python
    from lifxcolor.colors import COLORS, named

    red = COLORS.RED                      # Color(hue=0.0, saturation=1.0, ...)
    dim_blue = named("blue", brightness=0.2)
    warm_white = named("white", kelvin=2700)
    ```
"""

import logging

from lifxcolor.exceptions import UnknownColorError
from lifxcolor.models import DEFAULT_KELVIN, Color

logger = logging.getLogger(__name__)

# Hue in degrees for each named preset
NAMED_HUES: dict[str, float] = {
    "red": 0,
    "orange": 36,
    "yellow": 60,
    "green": 120,
    "cyan": 195,
    "blue": 250,
    "purple": 280,
    "pink": 325,
}


def named(
    name: str,
    saturation: float = 1.0,
    brightness: float = 1.0,
    kelvin: int = DEFAULT_KELVIN,
) -> Color:
    """
    Build a color from a preset name.

    "white" ignores saturation and returns `Color.white()`.

    Args:
        name: Preset name, case-insensitive (see NAMED_HUES, plus "white")
        saturation: Valid range 0-1
        brightness: Valid range 0-1
        kelvin: Valid range 2500-10000

    Raises:
        UnknownColorError: If the name is not a preset
    """
    key = name.strip().lower()
    if key == "white":
        return Color.white(brightness=brightness, kelvin=kelvin)

    if key not in NAMED_HUES:
        logger.debug(f"Unknown color preset requested: {name!r}")
        raise UnknownColorError(name, [*NAMED_HUES, "white"])

    return Color.hsbk(NAMED_HUES[key], saturation, brightness, kelvin)


class COLORS:
    """Preset color constants at full saturation and brightness."""

    RED: Color = named("red")
    ORANGE: Color = named("orange")
    YELLOW: Color = named("yellow")
    GREEN: Color = named("green")
    CYAN: Color = named("cyan")
    BLUE: Color = named("blue")
    PURPLE: Color = named("purple")
    PINK: Color = named("pink")
    WHITE: Color = named("white")

    OFF: Color = Color.white(brightness=0.0)
    """Zero brightness - light is dark but stays powered"""


__all__ = ["COLORS", "NAMED_HUES", "named"]
