"""Configuration management for limitless-sync."""

import logging
import os
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import tzlocal

logger = logging.getLogger(__name__)

SYNC_HOME = Path(os.environ.get("LIMITLESS_SYNC_HOME", Path.home() / ".limitless-sync"))
CONFIG_FILE = SYNC_HOME / "config" / "limitless-sync.conf"
API_KEY_ENV_VAR = "LIMITLESS_API_KEY"


class ConfigError(Exception):
    """Raised when a required setting is missing or malformed."""

    pass


@dataclass
class Config:
    """limitless-sync configuration."""

    api_key: str = ""
    folder_path: str = "Limitless Lifelogs"
    start_date: str = "2025-02-09"
    # Empty means the machine's local zone
    timezone: str = ""
    base_url: str = "https://api.limitless.ai"
    sync_time: str = "06:00"
    # Telegram notifications
    telegram_bot_token: str = ""
    telegram_chat_ids: list[int] = field(default_factory=list)

    def default_start(self) -> date:
        """Parse start_date, the first day fetched when nothing is synced yet."""
        try:
            return date.fromisoformat(self.start_date)
        except ValueError:
            raise ConfigError(
                f"Invalid START_DATE '{self.start_date}' (expected YYYY-MM-DD)"
            ) from None

    def resolved_timezone(self) -> str:
        """IANA timezone name sent to the API and used for rendering."""
        if self.timezone:
            return self.timezone
        return str(tzlocal.get_localzone())

    def zone(self) -> ZoneInfo:
        """The resolved timezone as a ZoneInfo."""
        name = self.resolved_timezone()
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            raise ConfigError(f"Unknown TIMEZONE '{name}'") from None

    def output_dir(self) -> Path:
        """Folder that receives the per-day markdown files."""
        path = Path(self.folder_path).expanduser()
        if not path.is_absolute():
            path = SYNC_HOME / path
        return path


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from unquoted values."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from limitless-sync.conf, then apply env overrides."""
    config = Config()
    path = path or CONFIG_FILE

    if path.exists():
        for line in path.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip().lower()
            value = _unquote(value.strip())

            match key:
                case "api_key":
                    config.api_key = value
                case "folder_path":
                    config.folder_path = value
                case "start_date":
                    config.start_date = value
                case "timezone":
                    config.timezone = value
                case "base_url":
                    config.base_url = value.rstrip("/")
                case "sync_time":
                    config.sync_time = value
                case "telegram_bot_token":
                    config.telegram_bot_token = value
                case "telegram_chat_ids":
                    try:
                        config.telegram_chat_ids = [
                            int(c.strip()) for c in value.split(",") if c.strip()
                        ]
                    except ValueError:
                        logger.warning(f"Failed to parse TELEGRAM_CHAT_IDS: {value}")
                case _:
                    logger.debug(f"Ignoring unknown config key: {key}")

    env_key = os.environ.get(API_KEY_ENV_VAR)
    if env_key:
        config.api_key = env_key

    return config
