"""Tests for configuration loading."""

from datetime import date
from unittest.mock import patch

import pytest

from limitless_sync.config import SYNC_HOME, Config, ConfigError, load_config


@pytest.fixture(autouse=True)
def no_env_key(monkeypatch):
    monkeypatch.delenv("LIMITLESS_API_KEY", raising=False)


class TestDefaults:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.conf")
        assert config == Config()
        assert config.api_key == ""
        assert config.folder_path == "Limitless Lifelogs"
        assert config.start_date == "2025-02-09"

    def test_default_start(self):
        assert Config().default_start() == date(2025, 2, 9)


class TestLoadConfig:
    def test_parses_keys(self, tmp_path):
        config_file = tmp_path / "limitless-sync.conf"
        config_file.write_text(
            "# Limitless settings\n"
            "API_KEY=abc123\n"
            'FOLDER_PATH="~/vault/Lifelogs"  # quoted\n'
            "START_DATE=2025-03-01 # first day\n"
            "TIMEZONE='Europe/Berlin'\n"
            "BASE_URL=http://localhost:8000/\n"
            "SYNC_TIME=07:30\n"
            "TELEGRAM_BOT_TOKEN=bot-token\n"
            "TELEGRAM_CHAT_IDS=1, 2,\n"
        )

        config = load_config(config_file)

        assert config.api_key == "abc123"
        assert config.folder_path == "~/vault/Lifelogs"
        assert config.start_date == "2025-03-01"
        assert config.timezone == "Europe/Berlin"
        assert config.base_url == "http://localhost:8000"
        assert config.sync_time == "07:30"
        assert config.telegram_bot_token == "bot-token"
        assert config.telegram_chat_ids == [1, 2]

    def test_ignores_junk_lines_and_unknown_keys(self, tmp_path):
        config_file = tmp_path / "limitless-sync.conf"
        config_file.write_text("no equals sign\n\nWHATEVER=1\napi_key = k\n")

        config = load_config(config_file)

        assert config.api_key == "k"

    def test_bad_chat_ids_are_ignored(self, tmp_path):
        config_file = tmp_path / "limitless-sync.conf"
        config_file.write_text("TELEGRAM_CHAT_IDS=me,you\n")

        assert load_config(config_file).telegram_chat_ids == []

    def test_env_api_key_overrides_file(self, tmp_path, monkeypatch):
        config_file = tmp_path / "limitless-sync.conf"
        config_file.write_text("API_KEY=from-file\n")
        monkeypatch.setenv("LIMITLESS_API_KEY", "from-env")

        assert load_config(config_file).api_key == "from-env"


class TestConfigHelpers:
    def test_invalid_start_date(self):
        with pytest.raises(ConfigError, match="START_DATE"):
            Config(start_date="2025/03/01").default_start()

    def test_explicit_timezone(self):
        config = Config(timezone="Europe/Berlin")
        assert config.resolved_timezone() == "Europe/Berlin"
        assert str(config.zone()) == "Europe/Berlin"

    @patch("limitless_sync.config.tzlocal.get_localzone")
    def test_local_timezone_fallback(self, mock_local):
        mock_local.return_value = "America/Toronto"
        assert Config().resolved_timezone() == "America/Toronto"

    def test_unknown_timezone(self):
        with pytest.raises(ConfigError, match="TIMEZONE"):
            Config(timezone="Mars/Olympus_Mons").zone()

    def test_relative_folder_resolves_under_home(self):
        assert Config(folder_path="Lifelogs").output_dir() == SYNC_HOME / "Lifelogs"

    def test_absolute_folder(self, tmp_path):
        assert Config(folder_path=str(tmp_path)).output_dir() == tmp_path
