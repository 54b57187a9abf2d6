"""Data models for chatroster."""

from .access import AccessLevel
from .color import Color, Okhsl
from .enums import ColorMode
from .palette import DEFAULT_PALETTE, PALETTE_ROLES, Palette
from .user import Nick, User, parse_identity
from .config import AppConfig

__all__ = [
    "AppConfig",
    # Models
    "Color",
    "Nick",
    "Okhsl",
    "Palette",
    "User",
    # Enums
    "AccessLevel",
    "ColorMode",
    # Constants
    "DEFAULT_PALETTE",
    "PALETTE_ROLES",
    "parse_identity",
]
