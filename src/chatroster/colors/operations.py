"""Color operators working in Okhsl space."""

import math

from chatroster.models.color import Color, Okhsl

from .okhsl import okhsl_to_srgb, srgb_to_okhsl


def to_hsl(color: Color) -> Okhsl:
    """Convert a color to Okhsl.

    Greys have saturation 0. Black and white have an undefined (NaN)
    saturation; it is replaced with `Okhsl.max_saturation()` so NaN never
    leaks into mix/lighten/darken. The lightness alone decides those two.
    """
    hue, saturation, lightness = srgb_to_okhsl(color.r, color.g, color.b)
    if math.isnan(saturation):
        saturation = Okhsl.max_saturation()

    return Okhsl(hue=hue, saturation=saturation, lightness=lightness)


def from_hsl(hsl: Okhsl) -> Color:
    """Convert Okhsl back to an opaque color."""
    r, g, b = okhsl_to_srgb(hsl.hue, hsl.saturation, hsl.lightness)
    return Color(r=r, g=g, b=b)


def alpha(color: Color, value: float) -> Color:
    """Copy of `color` with its alpha replaced."""
    return color.model_copy(update={"a": value})


def mix(a: Color, b: Color, factor: float) -> Color:
    """Interpolate between `a` (factor 0) and `b` (factor 1) in Okhsl.

    Hue travels the shorter way around the circle. `factor` is clamped
    to [0, 1].
    """
    factor = min(max(factor, 0.0), 1.0)
    a_hsl = to_hsl(a)
    b_hsl = to_hsl(b)

    hue_delta = (b_hsl.hue - a_hsl.hue + 180.0) % 360.0 - 180.0

    return from_hsl(
        Okhsl(
            hue=(a_hsl.hue + factor * hue_delta) % 360.0,
            saturation=a_hsl.saturation + factor * (b_hsl.saturation - a_hsl.saturation),
            lightness=a_hsl.lightness + factor * (b_hsl.lightness - a_hsl.lightness),
        )
    )


def _shift_lightness(color: Color, amount: float) -> Color:
    hsl = to_hsl(color)
    lightness = min(max(hsl.lightness + amount, 0.0), 1.0)
    return from_hsl(hsl.model_copy(update={"lightness": lightness}))


def lighten(color: Color, amount: float) -> Color:
    """Add a fixed `amount` to the Okhsl lightness (clamped to 1.0)."""
    return _shift_lightness(color, amount)


def darken(color: Color, amount: float) -> Color:
    """Subtract a fixed `amount` from the Okhsl lightness (clamped to 0.0)."""
    return _shift_lightness(color, -amount)


def is_dark(color: Color) -> bool:
    """True when the Okhsl lightness is below 0.5; exactly 0.5 is light."""
    return to_hsl(color).lightness < 0.5
