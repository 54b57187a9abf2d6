"""Color value models."""

from pydantic import BaseModel, ConfigDict, Field


class Color(BaseModel):
    """Floating point RGBA color.

    Channels are nominally in [0, 1] but are never clamped; callers that
    need a displayable color must keep their inputs in range. The model is
    frozen so colors can be shared and used as dict keys.
    """

    model_config = ConfigDict(frozen=True)

    r: float = Field(description="Red (0.0-1.0)")
    g: float = Field(description="Green (0.0-1.0)")
    b: float = Field(description="Blue (0.0-1.0)")
    a: float = Field(default=1.0, description="Alpha (0.0-1.0)")

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int) -> "Color":
        """Create an opaque color from 8-bit channels."""
        return cls(r=r / 255.0, g=g / 255.0, b=b / 255.0)

    def to_rgb8(self) -> tuple[int, int, int]:
        """Convert to 8-bit RGB, rounding to nearest and saturating at 0/255.

        Example:
            >>> Color(r=1.0, g=0.5, b=0.0).to_rgb8()
            (255, 128, 0)
        """
        return (_channel_to_u8(self.r), _channel_to_u8(self.g), _channel_to_u8(self.b))


class Okhsl(BaseModel):
    """Color in Björn Ottosson's Okhsl space.

    Hue is in degrees, saturation and lightness in [0, 1].
    """

    model_config = ConfigDict(frozen=True)

    hue: float = Field(description="Hue in degrees (0-360)")
    saturation: float = Field(description="Saturation (0.0-1.0)")
    lightness: float = Field(description="Lightness (0.0-1.0)")

    @staticmethod
    def max_saturation() -> float:
        """Upper bound of the saturation channel."""
        return 1.0


def _channel_to_u8(value: float) -> int:
    scaled = value * 255.0
    # round half away from zero; Python's round() is banker's rounding
    rounded = int(scaled + 0.5) if scaled >= 0 else -int(-scaled + 0.5)
    return min(max(rounded, 0), 255)
