"""Application configuration model."""

import logging
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field

from chatroster.model_manager.persistence import PydanticPersistence

from .enums import ColorMode
from .palette import Palette

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".chatroster" / "config.json"

PaletteRole = Literal["background", "text", "action", "accent", "alert", "error", "info", "success"]


class AppConfig(BaseModel):
    """Appearance settings for the roster UI."""

    palette: Palette = Field(
        default_factory=Palette.default,
        description="Theme colors, each a '#rrggbb' string",
    )
    nickname_color: ColorMode = Field(
        default=ColorMode.UNIQUE,
        description="'unique' derives a hue per participant, 'solid' uses the base role color",
    )
    nickname_base: PaletteRole = Field(
        default="accent",
        description="Palette role whose saturation and lightness nickname colors share",
    )

    @classmethod
    def load_or_default(cls, path: Optional[Path] = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.chatroster/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to file (default: ~/.chatroster/config.json)."""
        path = path or DEFAULT_CONFIG_PATH
        PydanticPersistence.save_json(self, path)
        logger.info(f"Saved configuration to {path}")
