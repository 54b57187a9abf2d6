"""Tests for the application configuration."""

import json

import pytest

from chatroster.exceptions import ConfigFileInvalidError, ConfigValidationError
from chatroster.models import AppConfig, ColorMode, Palette


class TestAppConfigDefaults:
    """Test default values."""

    @pytest.mark.unit
    def test_defaults(self):
        """A fresh config uses the built-in palette and unique colors."""
        config = AppConfig()
        assert config.palette == Palette.default()
        assert config.nickname_color == ColorMode.UNIQUE
        assert config.nickname_base == "accent"

    @pytest.mark.unit
    def test_missing_file_gives_defaults(self, config_path):
        """load_or_default does not need the file to exist."""
        config = AppConfig.load_or_default(config_path)
        assert config == AppConfig()
        assert not config_path.exists()


@pytest.mark.integration
class TestAppConfigFiles:
    """Test reading and writing config files."""

    def test_save_writes_hex(self, saved_config):
        """Saved palettes are hex strings."""
        data = json.loads(saved_config.read_text())
        assert data["palette"]["background"] == "#2b292d"
        assert data["nickname_color"] == "unique"
        assert data["nickname_base"] == "accent"

    def test_round_trip(self, config_path):
        """Saved values load back unchanged."""
        palette = Palette.from_hex_dict(dict(Palette.default().to_hex_dict(), accent="#123456"))
        config = AppConfig(palette=palette, nickname_color=ColorMode.SOLID, nickname_base="info")
        config.save(config_path)

        assert AppConfig.load_or_default(config_path) == config

    def test_partial_file(self, config_path):
        """Fields absent from the file take their defaults."""
        config_path.write_text(json.dumps({"nickname_color": "solid"}))

        config = AppConfig.load_or_default(config_path)
        assert config.nickname_color == ColorMode.SOLID
        assert config.palette == Palette.default()

    def test_invalid_palette_color(self, saved_config):
        """A malformed palette color names the field."""
        data = json.loads(saved_config.read_text())
        data["palette"]["accent"] = "#zzzzzz"
        saved_config.write_text(json.dumps(data))

        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(saved_config)

        assert exc_info.value.field == "palette.accent"
        assert "not a valid hex" in exc_info.value.user_message
        assert "#RRGGBB" in exc_info.value.recovery_hint

    def test_missing_palette_field(self, saved_config):
        """A palette missing a role is rejected, not filled in."""
        data = json.loads(saved_config.read_text())
        del data["palette"]["accent"]
        saved_config.write_text(json.dumps(data))

        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(saved_config)
        assert exc_info.value.field == "palette.accent"

    def test_invalid_color_mode(self, config_path):
        """Unknown color modes list the valid ones in the hint."""
        config_path.write_text(json.dumps({"nickname_color": "rainbow"}))

        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(config_path)
        assert "solid, unique" in exc_info.value.recovery_hint

    def test_invalid_json(self, config_path):
        """Syntax errors raise ConfigFileInvalidError."""
        config_path.write_text('{"nickname_color": "solid",}')

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            AppConfig.load_or_default(config_path)
        assert exc_info.value.file_path == str(config_path)
