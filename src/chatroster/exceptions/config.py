"""Errors raised while loading configuration and palette files.

- ConfigurationError: Base class
- ConfigFileInvalidError: The file is not JSON (or is empty)
- ConfigValidationError: The JSON does not describe a valid model
"""

from typing import Any, Optional

from .base import ChatRosterError


class ConfigurationError(ChatRosterError):
    """A settings file could not be turned into a model."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """File content could not be parsed as JSON."""

    def __init__(self, file_path: str, parse_error: str):
        super().__init__(
            user_message=f"Cannot read {file_path}: {parse_error}",
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recovery_hint=f"Fix or delete {file_path}; a missing file falls back to the defaults",
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """A field holds a value the model rejects."""

    _FIELD_HINTS = {
        "palette": "Palette colors are '#RRGGBB' strings, e.g. '#2b292d'",
        "nickname_color": "Color modes: solid, unique",
        "nickname_base": "Base roles: background, text, action, accent, alert, error, info, success",
    }

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        hint = self._FIELD_HINTS.get(field.split(".")[0])
        if file_path:
            location = f"Config file: {file_path}"
            hint = f"{hint}\n{location}" if hint else location

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"{field}={value!r} rejected: {error_msg}",
            recovery_hint=hint,
        )
        self.field = field
        self.value = value
        self.file_path = file_path
