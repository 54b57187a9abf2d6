"""Main entry point for chatroster."""

from chatroster.cli import cli

if __name__ == "__main__":
    cli()
