"""Color command implementations."""

import click

from chatroster.colors import color_to_hex, darken, is_dark, lighten, mix, randomize_color, to_hsl
from chatroster.models import PALETTE_ROLES, Color

from .common import HEX_COLOR, load_config, report_errors


@click.group(name="color")
def color_group():
    """Color math commands."""
    pass


def _describe(color: Color) -> str:
    hsl = to_hsl(color)
    shade = "dark" if is_dark(color) else "light"
    return (
        f"{color_to_hex(color)}  "
        f"h={hsl.hue:.1f} s={hsl.saturation:.3f} l={hsl.lightness:.3f}  ({shade})"
    )


@color_group.command(name="info")
@click.argument("color", type=HEX_COLOR)
def color_info(color: Color):
    """Show the Okhsl components of COLOR."""
    click.echo(_describe(color))


@color_group.command(name="seed")
@click.argument("seed")
@click.option(
    "--base",
    "-b",
    default=None,
    help="Base color as '#rrggbb' or a palette role (default: configured nickname base)",
)
@click.pass_context
@report_errors
def color_seed(ctx, seed: str, base: str | None):
    """Derive the participant color for SEED."""
    config = load_config(ctx)

    if base is None:
        base_color = config.palette.role(config.nickname_base)
    elif base in PALETTE_ROLES:
        base_color = config.palette.role(base)
    else:
        base_color = HEX_COLOR.convert(base, None, ctx)

    click.echo(_describe(randomize_color(base_color, seed)))


@color_group.command(name="mix")
@click.argument("first", type=HEX_COLOR)
@click.argument("second", type=HEX_COLOR)
@click.argument("factor", type=click.FloatRange(0.0, 1.0))
def color_mix(first: Color, second: Color, factor: float):
    """Mix FIRST towards SECOND by FACTOR (0-1)."""
    click.echo(_describe(mix(first, second, factor)))


@color_group.command(name="lighten")
@click.argument("color", type=HEX_COLOR)
@click.argument("amount", type=float)
def color_lighten(color: Color, amount: float):
    """Raise the lightness of COLOR by AMOUNT."""
    click.echo(_describe(lighten(color, amount)))


@color_group.command(name="darken")
@click.argument("color", type=HEX_COLOR)
@click.argument("amount", type=float)
def color_darken(color: Color, amount: float):
    """Lower the lightness of COLOR by AMOUNT."""
    click.echo(_describe(darken(color, amount)))
