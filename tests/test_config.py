"""Tests for src/dice_roller/config.py."""
from __future__ import annotations

import pytest

from dice_roller.config import ConfigError, Settings, load_config
from dice_roller.mechanics.dice import MAX_COUNT, MAX_SIDES


class TestDefaults:
    def test_defaults(self):
        settings = Settings()
        assert settings.dice.max_count == MAX_COUNT
        assert settings.dice.max_sides == MAX_SIDES
        assert settings.dice.default_notation == "1d20"
        assert settings.display.show_banner is True
        assert settings.logging.level == "WARNING"

    def test_missing_default_file_gives_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setattr("dice_roller.config.DEFAULT_CONFIG_PATH", tmp_path / "absent.toml")
        assert load_config() == Settings()


class TestLoadConfig:
    def test_reads_toml(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            '[dice]\nmax_sides = 1000\ndefault_notation = "2d100"\n'
            '[display]\nshow_banner = false\n'
            '[logging]\nlevel = "debug"\n'
        )
        settings = load_config(path)
        assert settings.dice.max_sides == 1000
        assert settings.dice.max_count == MAX_COUNT
        assert settings.dice.default_notation == "2d100"
        assert settings.display.show_banner is False
        assert settings.logging.level == "DEBUG"

    def test_explicit_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.toml")

    def test_bad_toml_raises(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[dice\nmax_sides = ")
        with pytest.raises(ConfigError, match="Could not parse"):
            load_config(path)

    @pytest.mark.parametrize("body", [
        "[dice]\nmax_sides = 0\n",
        "[dice]\nmax_count = -1\n",
        '[dice]\ndefault_notation = "abc"\n',
        '[dice]\nmax_sides = 10\ndefault_notation = "1d20"\n',
        '[logging]\nlevel = "LOUD"\n',
    ])
    def test_invalid_values_raise(self, tmp_path, body):
        path = tmp_path / "config.toml"
        path.write_text(body)
        with pytest.raises(ConfigError, match="Invalid config"):
            load_config(path)

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)
