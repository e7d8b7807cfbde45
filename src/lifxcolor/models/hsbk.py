"""Wire HSBK record used by the LIFX light protocol."""

import struct

from pydantic import BaseModel, ConfigDict, Field

UINT16_MAX = 65535

# hue, saturation, brightness, kelvin as little-endian uint16
_HSBK_STRUCT = struct.Struct("<HHHH")


class Hsbk(BaseModel):
    """Protocol-level HSBK color.

    Every field is an unsigned 16-bit integer. Hue, saturation and brightness
    are scaled to the full 0-65535 range; kelvin is carried as-is.

    This is the record a protocol layer sends to and receives from a bulb.
    Use `Color.from_wire()` / `Color.to_wire()` to convert to and from the
    floating-point `Color` representation.
    """

    model_config = ConfigDict(frozen=True)

    hue: int = Field(ge=0, le=UINT16_MAX, description="Hue (0-65535 maps to 0-360 degrees)")
    saturation: int = Field(ge=0, le=UINT16_MAX, description="Saturation (0-65535)")
    brightness: int = Field(ge=0, le=UINT16_MAX, description="Brightness (0-65535)")
    kelvin: int = Field(ge=0, le=UINT16_MAX, description="Color temperature in Kelvin")

    def to_tuple(self) -> tuple[int, int, int, int]:
        """Convert to (hue, saturation, brightness, kelvin) tuple."""
        return (self.hue, self.saturation, self.brightness, self.kelvin)

    def to_bytes(self) -> bytes:
        """Pack into the 8-byte little-endian payload layout.

        Example:
            >>> Hsbk(hue=0, saturation=65535, brightness=65535, kelvin=3500).to_bytes().hex()
            '0000ffffffffac0d'
        """
        return _HSBK_STRUCT.pack(*self.to_tuple())

    @classmethod
    def from_bytes(cls, data: bytes) -> "Hsbk":
        """Unpack an 8-byte little-endian payload.

        Raises:
            ValueError: If data is not exactly 8 bytes long
        """
        if len(data) != _HSBK_STRUCT.size:
            raise ValueError(
                f"HSBK payload must be {_HSBK_STRUCT.size} bytes, got {len(data)}"
            )
        hue, saturation, brightness, kelvin = _HSBK_STRUCT.unpack(data)
        return cls(hue=hue, saturation=saturation, brightness=brightness, kelvin=kelvin)
