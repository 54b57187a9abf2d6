"""User identity command implementations."""

import click

from chatroster.colors import color_to_hex
from chatroster.exceptions import collect_errors
from chatroster.models import User
from chatroster.ui_colors import get_user_color

from .common import load_config, report_errors


@click.group(name="user")
def user_group():
    """Participant identity commands."""
    pass


def _parse_all(identities: tuple[str, ...]) -> list[User]:
    """Parse every identity, reporting all failures at once."""
    collector = collect_errors("parse identities")
    users = []

    for raw in identities:
        with collector.try_operation(raw):
            users.append(User.parse(raw))

    if collector.has_errors:
        click.echo(collector.get_summary(), err=True)
        raise SystemExit(1)

    return users


@user_group.command(name="format")
@click.argument("identities", nargs=-1, required=True)
@click.pass_context
@report_errors
def format_users(ctx, identities: tuple[str, ...]):
    """Show canonical form, display form and color of each identity."""
    config = load_config(ctx)

    for user in _parse_all(identities):
        color = get_user_color(user, config.palette, config.nickname_color, config.nickname_base)
        seed = user.color_seed(config.nickname_color)
        click.echo(f"{user.canonical()}\t{user.formatted()}\t{seed or '-'}\t{color_to_hex(color)}")


@user_group.command(name="sort")
@click.argument("identities", nargs=-1, required=True)
@report_errors
def sort_users(identities: tuple[str, ...]):
    """Print identities in user list order (access level, then nickname)."""
    for user in sorted(_parse_all(identities)):
        click.echo(f"{user.highest_access_level().symbol}{user.nick}")
