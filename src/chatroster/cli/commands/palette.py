"""Palette command implementations."""

import json
from pathlib import Path

import click

from chatroster.model_manager import PydanticPersistence
from chatroster.models import PALETTE_ROLES, Palette

from .common import load_config, report_errors


@click.group(name="palette")
def palette_group():
    """Theme palette commands."""
    pass


@palette_group.command(name="show")
@click.option("--json", "as_json", is_flag=True, help="Print the persisted JSON form")
@click.option("--default", "use_default", is_flag=True, help="Show the built-in palette instead of the configured one")
@click.pass_context
@report_errors
def show_palette(ctx, as_json: bool, use_default: bool):
    """Show the palette colors."""
    palette = Palette.default() if use_default else load_config(ctx).palette
    hex_colors = palette.to_hex_dict()

    if as_json:
        click.echo(json.dumps(hex_colors, indent=2))
        return

    for role in PALETTE_ROLES:
        click.echo(f"{role:<12} {hex_colors[role]}")


@palette_group.command(name="validate")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate_palette(file: Path):
    """Check that FILE holds a complete palette of hex colors."""
    is_valid, error = PydanticPersistence.validate_json(file, Palette)
    if is_valid:
        click.echo(f"[OK] {file}")
        return

    click.echo(f"[FAIL] {file}: {error}", err=True)
    raise SystemExit(1)
