"""Data models for lifxcolor."""

from .color import (
    DEFAULT_KELVIN,
    EQUALITY_THRESHOLD,
    KELVIN_MAX,
    KELVIN_MIN,
    Color,
)
from .config import AppConfig
from .hsbk import UINT16_MAX, Hsbk

__all__ = [
    "AppConfig",
    # Models
    "Color",
    "Hsbk",
    # Constants
    "DEFAULT_KELVIN",
    "EQUALITY_THRESHOLD",
    "KELVIN_MAX",
    "KELVIN_MIN",
    "UINT16_MAX",
]
