"""`#RRGGBB` hex codec for colors."""

import re

from chatroster.exceptions import InvalidHexColorError
from chatroster.models.color import Color

_HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}")


def hex_to_color(value: str) -> Color:
    """Parse a `#RRGGBB` string into an opaque color.

    Each channel becomes byte / 255; alpha is always 1.0.

    Raises:
        InvalidHexColorError: On wrong length, missing `#` or non-hex digits
    """
    if not isinstance(value, str) or _HEX_COLOR.fullmatch(value) is None:
        raise InvalidHexColorError(value)

    return Color.from_rgb8(
        int(value[1:3], 16),
        int(value[3:5], 16),
        int(value[5:7], 16),
    )


def color_to_hex(color: Color) -> str:
    """Format a color as lowercase `#rrggbb`, ignoring alpha.

    Example:
        >>> color_to_hex(Color(r=1.0, g=0.0, b=0.0))
        '#ff0000'
    """
    r, g, b = color.to_rgb8()
    return f"#{r:02x}{g:02x}{b:02x}"


def is_hex_color(value: str) -> bool:
    """Return True when `value` is a valid `#RRGGBB` string."""
    return isinstance(value, str) and _HEX_COLOR.fullmatch(value) is not None
