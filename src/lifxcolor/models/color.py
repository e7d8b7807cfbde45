"""Color model for LIFX lights.

A `Color` stores HSBK (hue, saturation, brightness, kelvin), the native
representation of the LIFX protocol. Named constructors build one from
HSB/HSV, HSL, RGB or a wire `Hsbk` record; `to_wire()` produces the
integer-encoded record a protocol layer sends to the bulb.
"""

import colorsys
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .hsbk import UINT16_MAX, Hsbk

logger = logging.getLogger(__name__)

DEFAULT_KELVIN = 3500
KELVIN_MIN = 2500
KELVIN_MAX = 10000

# 0.1% variance
EQUALITY_THRESHOLD = 0.001


def _clamp(value: int, low: int, high: int) -> int:
    return sorted((low, value, high))[1]


class Color(BaseModel):
    """HSBK color value.

    Hue is stored in degrees and always normalized into [0, 360) on
    construction, so `Color.hsb(-10, 1, 1).hue == 350`. Saturation and
    brightness are fractions nominally in [0, 1] and kelvin is nominally
    2500-10000, but none of them is range-checked: out-of-range values are
    only clamped when exporting with `to_wire()`. NaN and infinity are
    rejected with a `pydantic.ValidationError`.

    Equality is approximate. Two colors compare equal when hue differs by
    less than 0.36 degrees and saturation and brightness each differ by less
    than 0.001. Kelvin is NOT compared, so two whites of different
    temperature at the same brightness are equal. Because this tolerance is
    not transitive, colors are unhashable.

    The model is frozen; every transformation returns a new Color. Unknown
    keyword arguments are rejected rather than ignored.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False, extra="forbid")

    hue: float = Field(description="Hue in degrees [0, 360)")
    saturation: float = Field(description="Saturation (0-1)")
    brightness: float = Field(description="Brightness (0-1)")
    kelvin: int = Field(description="White point color temperature (2500-10000)")

    def __init__(
        self,
        hue: float,
        saturation: float,
        brightness: float,
        kelvin: int = DEFAULT_KELVIN,
        **data: Any,
    ):
        # Stray keywords are forwarded so pydantic reports them (extra="forbid")
        super().__init__(
            hue=hue, saturation=saturation, brightness=brightness, kelvin=kelvin, **data
        )

    def model_copy(self, *, update: dict[str, Any] | None = None, deep: bool = False) -> "Color":
        """Copy with optional field updates, validated like a new Color.

        Updates go through the constructor, so hue is normalized and
        non-finite or unknown fields are rejected.
        """
        return Color(**{**self.model_dump(), **(update or {})})

    @field_validator("hue")
    @classmethod
    def normalize_hue(cls, v: float) -> float:
        """Reduce hue into [0, 360) using true modulo."""
        hue = v % 360.0
        # A tiny negative hue rounds up to exactly 360.0
        return hue if hue < 360.0 else 0.0

    @classmethod
    def white(cls, brightness: float = 1.0, kelvin: int = DEFAULT_KELVIN) -> "Color":
        """Create a white color.

        Args:
            brightness: Valid range 0-1
            kelvin: Valid range 2500-10000
        """
        return cls(0, 0, brightness, kelvin)

    @classmethod
    def hsb(cls, hue: float, saturation: float, brightness: float) -> "Color":
        """Create from HSB/HSV with the default kelvin.

        Args:
            hue: Degrees, valid range 0-360
            saturation: Valid range 0-1
            brightness: Valid range 0-1
        """
        return cls(hue, saturation, brightness, DEFAULT_KELVIN)

    hsv = hsb

    @classmethod
    def hsbk(cls, hue: float, saturation: float, brightness: float, kelvin: int) -> "Color":
        """Create from HSBK/HSVK."""
        return cls(hue, saturation, brightness, kelvin)

    @classmethod
    def hsl(cls, hue: float, saturation: float, luminance: float) -> "Color":
        """Create from HSL with the default kelvin.

        Black (luminance 0) has no defined HSB saturation; it is returned
        with saturation 0.

        Args:
            hue: Degrees, valid range 0-360
            saturation: Valid range 0-1
            luminance: Valid range 0-1

        Example:
            >>> Color.hsl(120, 1.0, 0.5).to_tuple()
            (120.0, 1.0, 1.0, 3500)
        """
        # http://ariya.blogspot.com/2008/07/converting-between-hsl-and-hsv.html
        l = luminance * 2
        saturation *= l if l <= 1 else 2 - l
        brightness = (l + saturation) / 2
        if l + saturation == 0:
            logger.debug(f"HSL luminance {luminance} is black, using saturation 0")
            saturation = 0.0
        else:
            saturation = (2 * saturation) / (l + saturation)
        return cls(hue, saturation, brightness, DEFAULT_KELVIN)

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create from 8-bit RGB with the default kelvin.

        When several channels share the maximum, red wins over green and
        green wins over blue when picking the hue sector.

        Args:
            r: Red (0-255)
            g: Green (0-255)
            b: Blue (0-255)

        Example:
            >>> Color.rgb(0, 0, 255).to_tuple()
            (240.0, 1.0, 1.0, 3500)
        """
        r = r / 255.0
        g = g / 255.0
        b = b / 255.0

        high = max(r, g, b)
        low = min(r, g, b)
        d = high - low

        saturation = 0.0 if high == 0 else d / high

        if high == low:
            hue = 0.0
        elif high == r:
            hue = ((g - b) / d + (6 if g < b else 0)) * 60
        elif high == g:
            hue = ((b - r) / d + 2) * 60
        else:
            hue = ((r - g) / d + 4) * 60

        return cls(hue, saturation, high, DEFAULT_KELVIN)

    @classmethod
    def from_wire(cls, hsbk: Any) -> "Color":
        """Create from a wire HSBK record.

        Accepts an `Hsbk` or any object with integer `hue`, `saturation`,
        `brightness` and `kelvin` attributes. Kelvin is passed through.
        """
        return cls(
            hsbk.hue / UINT16_MAX * 360,
            hsbk.saturation / UINT16_MAX,
            hsbk.brightness / UINT16_MAX,
            hsbk.kelvin,
        )

    def with_hue(self, hue: float) -> "Color":
        """Copy with a different hue."""
        return Color(hue, self.saturation, self.brightness, self.kelvin)

    def with_saturation(self, saturation: float) -> "Color":
        """Copy with a different saturation."""
        return Color(self.hue, saturation, self.brightness, self.kelvin)

    def with_brightness(self, brightness: float) -> "Color":
        """Copy with a different brightness."""
        return Color(self.hue, self.saturation, brightness, self.kelvin)

    def with_kelvin(self, kelvin: int) -> "Color":
        """Copy with a different kelvin."""
        return Color(self.hue, self.saturation, self.brightness, kelvin)

    def to_wire(self) -> Hsbk:
        """Convert to the wire HSBK record.

        Scaled values are truncated toward zero, not rounded, so existing
        wire consumers see bit-identical output. Kelvin is clamped to
        2500-10000 and saturation/brightness to the uint16 range.

        Example:
            >>> Color.hsb(180, 1.0, 0.5).to_wire().to_tuple()
            (32767, 65535, 32767, 3500)
        """
        return Hsbk(
            hue=int(self.hue / 360.0 * UINT16_MAX),
            saturation=_clamp(int(self.saturation * UINT16_MAX), 0, UINT16_MAX),
            brightness=_clamp(int(self.brightness * UINT16_MAX), 0, UINT16_MAX),
            kelvin=_clamp(self.kelvin, KELVIN_MIN, KELVIN_MAX),
        )

    def to_tuple(self) -> tuple[float, float, float, int]:
        """Convert to (hue, saturation, brightness, kelvin) tuple."""
        return (self.hue, self.saturation, self.brightness, self.kelvin)

    def to_rgb(self) -> tuple[int, int, int]:
        """Convert to an 8-bit RGB tuple, ignoring kelvin.

        Saturation and brightness are clamped to 0-1 first.
        """
        saturation = min(max(self.saturation, 0.0), 1.0)
        brightness = min(max(self.brightness, 0.0), 1.0)
        r, g, b = colorsys.hsv_to_rgb(self.hue / 360.0, saturation, brightness)
        return (round(r * 255), round(g * 255), round(b * 255))

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000')."""
        r, g, b = self.to_rgb()
        return f"#{r:02X}{g:02X}{b:02X}"

    def similar_to(self, other: object, threshold: float = EQUALITY_THRESHOLD) -> bool:
        """Check whether two colors are equal within a threshold.

        Hue tolerance is `threshold * 360` degrees; saturation and brightness
        tolerance is `threshold`. Kelvin is ignored. Anything that is not a
        Color is never similar.
        """
        if not isinstance(other, Color):
            return False
        return (
            abs(self.hue - other.hue) < threshold * 360
            and abs(self.saturation - other.saturation) < threshold
            and abs(self.brightness - other.brightness) < threshold
        )

    def __eq__(self, other: object) -> bool:
        return self.similar_to(other)

    __hash__ = None
