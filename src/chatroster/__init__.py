"""chatroster: identity and appearance model for chat client rosters."""

__version__ = "0.1.0"

# Models load first; the palette model pulls in the color codec.
from .models import AccessLevel, AppConfig, Color, ColorMode, Nick, Okhsl, Palette, User
from .colors import randomize_color

__all__ = [
    "AccessLevel",
    "AppConfig",
    "Color",
    "ColorMode",
    "Nick",
    "Okhsl",
    "Palette",
    "User",
    "randomize_color",
]
