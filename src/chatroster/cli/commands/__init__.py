"""CLI commands for chatroster."""

from .color import color_group
from .palette import palette_group
from .user import user_group

__all__ = ["color_group", "palette_group", "user_group"]
