"""Shared workflow layer between the CLI and the scheduler.

sync_lifelogs walks every day from the sync cursor to today, fetches its
lifelogs, renders them and writes one markdown file per day.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import date, datetime, tzinfo

from .adapters.limitless_api import FetchError, LimitlessAPIAdapter
from .adapters.local_storage import LocalFileStorage
from .adapters.notifiers import CompositeNotifier, ConsoleNotifier, LogNotifier, TelegramNotifier
from .config import Config, ConfigError
from .core.formatter import format_day
from .core.sync_cursor import dates_to_sync, latest_synced_date, sync_start_date, synced_filename
from .ports import FileStorage, LifelogRepository, Notifier, StorageScanError

logger = logging.getLogger(__name__)

# One sync per process; the CLI and the scheduler share it
_sync_lock = threading.Lock()


class SyncInProgressError(Exception):
    """Raised when a sync is started while another one is running."""

    pass


@dataclass
class SyncResult:
    """Outcome of a sync run."""

    start: date
    end: date
    written: list[date] = field(default_factory=list)


def last_synced_date(storage: FileStorage, folder: str) -> date | None:
    """
    Latest day already written to folder.

    Never raises: a folder that cannot be scanned is treated like an
    empty one, so the sync falls back to the configured start date.
    """
    try:
        if not storage.folder_exists(folder):
            logger.info(f"No synced files in {folder} (folder does not exist yet)")
            return None
        files = storage.list_files(folder)
    except (StorageScanError, OSError) as e:
        logger.warning(f"Scan of {folder} failed, treating as never synced: {e}")
        return None

    latest = latest_synced_date(files)
    if latest is None:
        logger.info(f"No synced files in {folder}")
    else:
        logger.debug(f"Last synced date in {folder}: {latest}")
    return latest


class LifelogSync:
    """A single incremental sync run over injected ports."""

    def __init__(
        self,
        repository: LifelogRepository,
        storage: FileStorage,
        notifier: Notifier,
        folder: str,
        default_start: date,
        today: date | None = None,
        tz: tzinfo | None = None,
        start_override: date | None = None,
        lock: threading.Lock | None = None,
    ):
        self.repository = repository
        self.storage = storage
        self.notifier = notifier
        self.folder = folder.rstrip("/") or "/"
        self.default_start = default_start
        self.today = today or date.today()
        self.tz = tz
        self.start_override = start_override
        self._lock = lock or _sync_lock

    def _ensure_folder(self) -> None:
        if not self.storage.folder_exists(self.folder):
            logger.info(f"Creating output folder {self.folder}")
            self.storage.create_folder(self.folder)

    def start_date(self) -> date:
        """First day this run will fetch."""
        if self.start_override is not None:
            return self.start_override
        return sync_start_date(last_synced_date(self.storage, self.folder), self.default_start)

    def file_path(self, target_date: date) -> str:
        return f"{self.folder}/{synced_filename(target_date)}"

    def run(self) -> SyncResult:
        """Sync every day from the cursor through today."""
        if not self._lock.acquire(blocking=False):
            raise SyncInProgressError("A lifelog sync is already running")
        try:
            return self._run()
        finally:
            self._lock.release()

    def _run(self) -> SyncResult:
        self._ensure_folder()
        result = SyncResult(start=self.start_date(), end=self.today)
        logger.info(f"Syncing lifelogs from {result.start} to {result.end} into {self.folder}")

        self.notifier.notify("Starting Limitless lifelog sync...")

        for day in dates_to_sync(result.start, result.end):
            records = self.repository.fetch_day(day)
            if not records:
                logger.debug(f"No lifelogs for {day}")
                continue

            self.storage.write_file(self.file_path(day), format_day(records, self.tz))
            result.written.append(day)
            self.notifier.notify(f"Synced {len(records)} entries for {day.isoformat()}")

        self.notifier.notify("Limitless lifelog sync complete!")
        return result


# ============== Wiring from Config ==============


def get_repository(config: Config) -> LimitlessAPIAdapter:
    """Build the API adapter from config."""
    return LimitlessAPIAdapter(
        api_key=config.api_key,
        base_url=config.base_url,
        timezone=config.resolved_timezone(),
    )


def get_notifier(config: Config, console: bool = False) -> Notifier:
    """Log notifications, plus the console and Telegram where enabled."""
    notifiers: list = [LogNotifier()]
    if console:
        notifiers.append(ConsoleNotifier())
    if config.telegram_bot_token and config.telegram_chat_ids:
        notifiers.append(TelegramNotifier(config.telegram_bot_token, config.telegram_chat_ids))
    return CompositeNotifier(notifiers)


def sync_lifelogs(
    config: Config,
    notifier: Notifier | None = None,
    repository: LifelogRepository | None = None,
    storage: FileStorage | None = None,
    start_override: date | None = None,
    today: date | None = None,
) -> SyncResult:
    """Check config, run one sync, and report a failure once before re-raising."""
    notifier = notifier or get_notifier(config)

    if not config.api_key:
        notifier.notify("Please set your Limitless API key (API_KEY in limitless-sync.conf)")
        raise ConfigError("Missing Limitless API key")

    default_start = config.default_start()
    zone = config.zone()
    sync = LifelogSync(
        repository=repository or get_repository(config),
        storage=storage or LocalFileStorage(),
        notifier=notifier,
        folder=str(config.output_dir()),
        default_start=default_start,
        today=today or datetime.now(zone).date(),
        tz=zone,
        start_override=start_override,
    )

    try:
        return sync.run()
    except (FetchError, OSError) as e:
        logger.exception("Error syncing lifelogs")
        notifier.notify(f"Error syncing Limitless lifelogs: {e}")
        raise
