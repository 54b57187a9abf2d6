"""Tests for CLI commands.

Uses Click's CliRunner with --config pointing into a temporary directory
so the user's own configuration is never read.
"""

import json
import logging

import pytest
from click.testing import CliRunner

from chatroster.cli import main
from chatroster.cli.main import cli, setup_logging
from chatroster.colors import color_to_hex, hex_to_color, mix, randomize_color
from chatroster.models import AppConfig, ColorMode, Palette


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop the handler setup_logging installs on the root logger."""
    yield
    if main._log_handler is not None:
        logging.getLogger().removeHandler(main._log_handler)
        main._log_handler.close()
        main._log_handler = None


@pytest.fixture
def invoke(runner, config_path):
    """Run the CLI against a temporary config file."""

    def _invoke(*args):
        return runner.invoke(cli, ["--config", str(config_path), *args])

    return _invoke


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Chat roster colors and identities" in result.output

    def test_version_flag(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    @pytest.mark.parametrize("group", ["palette", "color", "user"])
    def test_group_help(self, runner, group):
        result = runner.invoke(cli, [group, "--help"])
        assert result.exit_code == 0


@pytest.mark.integration
class TestPaletteCommands:
    """Test palette show/validate."""

    def test_show_defaults(self, invoke):
        result = invoke("palette", "show")
        assert result.exit_code == 0
        assert "background   #2b292d" in result.output
        assert "success      #b1b695" in result.output

    def test_show_json(self, invoke, palette):
        result = invoke("palette", "show", "--json")
        assert result.exit_code == 0
        assert json.loads(result.output) == palette.to_hex_dict()

    def test_show_configured(self, invoke, config_path, palette):
        custom = Palette.from_hex_dict(dict(palette.to_hex_dict(), accent="#0000ff"))
        AppConfig(palette=custom).save(config_path)

        assert "accent       #0000ff" in invoke("palette", "show").output
        assert "accent       #d1d1e0" in invoke("palette", "show", "--default").output

    def test_show_broken_config(self, invoke, config_path):
        config_path.write_text("{")

        result = invoke("palette", "show")
        assert result.exit_code == 1
        assert f"ERROR: Cannot read {config_path}" in result.output

    def test_validate_ok(self, invoke, tmp_path, palette):
        path = tmp_path / "palette.json"
        path.write_text(palette.model_dump_json())

        result = invoke("palette", "validate", str(path))
        assert result.exit_code == 0
        assert "[OK]" in result.output

    def test_validate_missing_field(self, invoke, tmp_path, palette):
        data = palette.to_hex_dict()
        del data["accent"]
        path = tmp_path / "palette.json"
        path.write_text(json.dumps(data))

        result = invoke("palette", "validate", str(path))
        assert result.exit_code == 1
        assert "[FAIL]" in result.output
        assert "accent" in result.output


@pytest.mark.integration
class TestColorCommands:
    """Test color math commands."""

    def test_info(self, invoke):
        result = invoke("color", "info", "#000000")
        assert result.exit_code == 0
        assert result.output.startswith("#000000")
        assert "(dark)" in result.output

    def test_info_light(self, invoke):
        assert "(light)" in invoke("color", "info", "#FFFFFF").output

    def test_info_bad_hex(self, invoke):
        result = invoke("color", "info", "#fff")
        assert result.exit_code == 2
        assert "not a valid hex color" in result.output

    def test_seed_uses_configured_base(self, invoke, palette):
        expected = color_to_hex(randomize_color(palette.accent, "irc.example.org"))

        result = invoke("color", "seed", "irc.example.org")
        assert result.exit_code == 0
        assert result.output.startswith(expected)

    def test_seed_with_role(self, invoke, palette):
        expected = color_to_hex(randomize_color(palette.error, "alice"))
        assert invoke("color", "seed", "alice", "--base", "error").output.startswith(expected)

    def test_seed_with_hex(self, invoke):
        expected = color_to_hex(randomize_color(hex_to_color("#e06b75"), "alice"))
        assert invoke("color", "seed", "alice", "-b", "#e06b75").output.startswith(expected)

    def test_mix(self, invoke):
        expected = color_to_hex(mix(hex_to_color("#e06b75"), hex_to_color("#f5d76e"), 0.5))

        result = invoke("color", "mix", "#e06b75", "#f5d76e", "0.5")
        assert result.exit_code == 0
        assert result.output.startswith(expected)

    def test_mix_factor_out_of_range(self, invoke):
        result = invoke("color", "mix", "#e06b75", "#f5d76e", "1.5")
        assert result.exit_code == 2

    def test_lighten_and_darken(self, invoke):
        assert invoke("color", "lighten", "#808080", "1").output.startswith("#ffffff")
        assert invoke("color", "darken", "#808080", "1").output.startswith("#000000")


@pytest.mark.integration
class TestUserCommands:
    """Test identity commands."""

    def test_format(self, invoke, palette):
        expected = color_to_hex(randomize_color(palette.accent, "h.example"))

        result = invoke("user", "format", "@bob!b@h.example")
        assert result.exit_code == 0
        assert result.output.strip() == f"bob!b@h.example\tbob (b@h.example)\th.example\t{expected}"

    def test_format_solid(self, invoke, config_path, palette):
        AppConfig(nickname_color=ColorMode.SOLID).save(config_path)

        result = invoke("user", "format", "bob")
        assert result.output.strip() == f"bob\tbob\t-\t{color_to_hex(palette.accent)}"

    def test_sort(self, invoke):
        result = invoke("user", "sort", "alpha", "~zeta", "~Alpha", "+mike", "@Bravo")
        assert result.exit_code == 0
        assert result.output.splitlines() == ["~Alpha", "~zeta", "@Bravo", "+mike", "alpha"]

    def test_bad_identities_reported_together(self, invoke):
        result = invoke("user", "sort", "alice", "@", "!x")
        assert result.exit_code == 1
        assert "Failed to parse identities: 2 of 3 failed" in result.output


@pytest.mark.integration
class TestLoggingSetup:
    """Test root logger configuration."""

    def test_repeated_setup_keeps_one_handler(self):
        root_logger = logging.getLogger()
        before = len(root_logger.handlers)

        setup_logging(0, None)
        first = main._log_handler
        setup_logging(2, None)

        assert main._log_handler is not first
        assert first not in root_logger.handlers
        assert len(root_logger.handlers) == before + 1
        assert main._log_handler.level == logging.DEBUG

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "chatroster.log"

        setup_logging(1, log_file)
        logging.getLogger("chatroster.test").info("hello from the roster")
        main._log_handler.flush()

        assert "hello from the roster" in log_file.read_text()
