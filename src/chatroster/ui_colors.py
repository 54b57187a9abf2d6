"""UI Color Definitions - Single source of truth for roster colors.

Maps semantic roles and participants to concrete colors.

Color Scheme:
- Semantic roles (background, text, action, ...): straight from the palette
- Nicknames, solid mode: the base role color for everyone
- Nicknames, unique mode: base role saturation/lightness with a hue
  derived from the participant's hostname (or nickname when the host is
  unknown)
- Muted text: the text color pulled towards the background
"""

from chatroster.colors import darken, is_dark, lighten, mix, randomize_color
from chatroster.models import PALETTE_ROLES, Color, ColorMode, Palette, User

ROLE_NAMES: tuple[str, ...] = PALETTE_ROLES

# Fixed lightness step used for hover/selection variants
HIGHLIGHT_AMOUNT = 0.1

# How far muted text moves from the text color towards the background
MUTED_TEXT_FACTOR = 0.4


def get_role_color(palette: Palette, role: str) -> Color:
    """Get the palette color for a semantic role.

    Raises:
        KeyError: If `role` is not one of ROLE_NAMES
    """
    return palette.role(role)


def get_user_color(
    user: User,
    palette: Palette,
    mode: ColorMode,
    base_role: str = "accent",
) -> Color:
    """Get the nickname color for a participant.

    Color priority:
    1. Unique mode with a seed - hue derived from the user's color seed
    2. Otherwise - the base role color itself

    Args:
        user: The participant
        palette: Active theme palette
        mode: Nickname color mode from the configuration
        base_role: Palette role providing saturation and lightness

    Returns:
        Color: The color to render the nickname with
    """
    base = get_role_color(palette, base_role)

    seed = user.color_seed(mode)
    if seed is None:
        return base

    return randomize_color(base, seed)


def get_highlight_color(color: Color, background: Color) -> Color:
    """Hover/selection variant of `color` that moves away from the background."""
    if is_dark(background):
        return lighten(color, HIGHLIGHT_AMOUNT)
    return darken(color, HIGHLIGHT_AMOUNT)


def get_muted_text_color(palette: Palette) -> Color:
    """Secondary text color, between text and background."""
    return mix(palette.text, palette.background, MUTED_TEXT_FACTOR)
