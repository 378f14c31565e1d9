"""Tests for configuration loading and persistence."""

import pytest
from pydantic import ValidationError

from sleeper_client.config import DEFAULT_BASE_URL, Config, ConfigManager


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SLEEPER_LEAGUE_ID", "SLEEPER_BASE_URL", "SLEEPER_TIMEOUT", "SLEEPER_MAX_ATTEMPTS", "SLEEPER_TIMEZONE"):
        monkeypatch.delenv(name, raising=False)


class TestConfigManager:
    def test_defaults(self, tmp_path):
        config = ConfigManager(tmp_path).load_config()

        assert config.league_id is None
        assert config.base_url == DEFAULT_BASE_URL
        assert config.max_attempts == 1

    def test_save_and_load(self, tmp_path):
        manager = ConfigManager(tmp_path)
        manager.save_config(Config(league_id="123", timeout=5.0))

        config = manager.load_config()
        assert config.league_id == "123"
        assert config.timeout == 5.0

    def test_invalid_file_falls_back_to_defaults(self, tmp_path):
        (tmp_path / "config.json").write_text("{not json")

        assert ConfigManager(tmp_path).load_config() == Config()

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        manager = ConfigManager(tmp_path)
        manager.save_config(Config(league_id="123"))
        monkeypatch.setenv("SLEEPER_LEAGUE_ID", "999")
        monkeypatch.setenv("SLEEPER_MAX_ATTEMPTS", "3")

        config = manager.load_config()
        assert config.league_id == "999"
        assert config.max_attempts == 3

    def test_unknown_timezone_falls_back_to_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SLEEPER_LEAGUE_ID", "123")
        monkeypatch.setenv("SLEEPER_TIMEZONE", "Mars/Olympus_Mons")

        assert ConfigManager(tmp_path).load_config() == Config()


class TestConfig:
    def test_timezone_validated(self):
        with pytest.raises(ValidationError, match="Unknown timezone"):
            Config(timezone="Mars/Olympus_Mons")

    def test_valid_timezone(self):
        assert Config(timezone="Europe/London").timezone == "Europe/London"
