"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from chatroster import __version__

from .commands import color_group, palette_group, user_group

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handler installed by the last setup_logging call
_log_handler: Optional[logging.Handler] = None


def setup_logging(verbose: int, log_file: Optional[Path]) -> None:
    """
    Configure logging for the CLI.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        log_file: Write logs to this file (rotating) instead of stderr
    """
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        # Rotating file handler (keeps last 5 files, max 10MB each)
        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
        )
    else:
        handler = logging.StreamHandler()

    handler.setLevel(level)
    handler.setFormatter(formatter)

    global _log_handler
    root_logger = logging.getLogger()
    if _log_handler is not None:
        root_logger.removeHandler(_log_handler)
        _log_handler.close()
    _log_handler = handler
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="chatroster")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file (default: ~/.chatroster/config.json)",
)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v: INFO, -vv: DEBUG)")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write logs to this file instead of stderr",
)
def cli(ctx, config_path: Optional[Path], verbose: int, log_file: Optional[Path]):
    """
    Chat roster colors and identities.

    Inspect the theme palette, derive per-participant colors and check
    how identities are parsed, displayed and sorted.

    \b
    Examples:
      # Show the active palette
      chatroster palette show

      # Nickname color for a host
      chatroster color seed irc.example.org

      # Sort a user list
      chatroster user sort "@alice" bob "+Carol"
    """
    setup_logging(verbose, log_file)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


cli.add_command(palette_group)
cli.add_command(color_group)
cli.add_command(user_group)

if __name__ == "__main__":
    cli()
