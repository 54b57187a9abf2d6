"""Enumerations for chatroster."""

from enum import Enum


class ColorMode(str, Enum):
    """How participant nicknames are colored."""

    SOLID = "solid"  # Every nickname uses the same palette color
    UNIQUE = "unique"  # Hue derived from the participant's hostname or nickname
