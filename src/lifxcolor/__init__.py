"""lifxcolor: HSBK color values for the LIFX light protocol."""

__version__ = "0.1.0"

from .models import Color, Hsbk

__all__ = [
    "Color",
    "Hsbk",
]
