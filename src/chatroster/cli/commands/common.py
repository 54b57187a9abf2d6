"""Helpers shared by CLI commands."""

import logging
from functools import wraps

import click

from chatroster.colors import hex_to_color
from chatroster.exceptions import ChatRosterError, format_error_for_display
from chatroster.models import AppConfig, Color

logger = logging.getLogger(__name__)


class HexColorType(click.ParamType):
    """Click parameter accepting a `#RRGGBB` color."""

    name = "hex color"

    def convert(self, value, param, ctx) -> Color:
        if isinstance(value, Color):
            return value
        try:
            return hex_to_color(value)
        except ChatRosterError as e:
            self.fail(e.user_message, param, ctx)


HEX_COLOR = HexColorType()


def load_config(ctx: click.Context) -> AppConfig:
    """Load the configuration selected with --config."""
    return AppConfig.load_or_default((ctx.obj or {}).get("config_path"))


def report_errors(func):
    """Print chatroster errors with their recovery hint and exit with code 1."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ChatRosterError as e:
            logger.debug(f"{func.__name__} failed: {e.technical_message}")
            user_message, recovery_hint = format_error_for_display(e)
            click.echo(f"ERROR: {user_message}", err=True)
            if recovery_hint:
                click.echo(f"\n{recovery_hint}", err=True)
            raise SystemExit(1) from e

    return wrapper
