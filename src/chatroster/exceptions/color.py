"""Color-related exceptions.

This module defines exceptions for color parsing and palette loading:
- ColorError: Base class for color errors
- InvalidHexColorError: A string is not a `#RRGGBB` hex color
- PaletteError: A palette mapping could not be turned into a Palette
"""

from .base import ChatRosterError


class ColorError(ChatRosterError):
    """Color value is invalid or cannot be derived."""
    pass


class InvalidHexColorError(ColorError, ValueError):
    """String is not a valid `#RRGGBB` hex color.

    Also a ValueError so that pydantic field validators report it as a
    regular validation failure.
    """

    def __init__(self, value: object):
        """
        Initialize invalid hex color error.

        Args:
            value: The rejected input
        """
        super().__init__(
            user_message=f"not a valid hex color: {value!r}",
            technical_message=f"Expected '#RRGGBB' with 6 hex digits, got {value!r}",
            recovery_hint="Use a 7 character color such as '#2b292d'",
        )
        self.value = value


class PaletteError(ColorError):
    """Palette mapping is missing fields or holds invalid colors."""

    def __init__(self, problems: list[tuple[str, str]]):
        """
        Initialize palette error.

        Args:
            problems: (field, reason) pairs, one per failing field
        """
        fields = ", ".join(field for field, _ in problems)
        details = "; ".join(f"{field}: {reason}" for field, reason in problems)
        super().__init__(
            user_message=f"Invalid palette ({fields})",
            technical_message=f"Palette validation failed: {details}",
            recovery_hint=(
                "A palette needs background, text, action, accent, alert, "
                "error, info and success, each as a '#RRGGBB' string"
            ),
        )
        self.problems = problems
