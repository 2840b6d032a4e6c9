"""Scheduled lifelog sync."""

import logging
from typing import Callable

from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.cron import CronTrigger

from .config import Config, ConfigError, load_config
from .workflows import SyncInProgressError, get_notifier, sync_lifelogs

logger = logging.getLogger(__name__)


def parse_sync_time(value: str) -> tuple[int, int]:
    """Parse HH:MM into (hour, minute)."""
    try:
        hour, minute = map(int, value.split(":"))
    except ValueError:
        raise ConfigError(f"Invalid SYNC_TIME '{value}' (expected HH:MM)") from None
    if not (0 <= hour < 24 and 0 <= minute < 60):
        raise ConfigError(f"Invalid SYNC_TIME '{value}' (expected HH:MM)")
    return hour, minute


def run_scheduled_sync(config: Config) -> None:
    """Scheduler job: run one sync, keeping the scheduler alive on failure."""
    logger.info("Running scheduled lifelog sync")
    try:
        result = sync_lifelogs(config, notifier=get_notifier(config))
        logger.info(f"Scheduled sync wrote {len(result.written)} day(s)")
    except SyncInProgressError:
        logger.warning("Skipping scheduled sync, another sync is still running")
    except Exception as e:
        logger.error(f"Scheduled sync failed: {e}")


def create_scheduler(
    config: Config | None = None,
    job: Callable[[Config], None] = run_scheduled_sync,
) -> BlockingScheduler:
    """Set up the daily sync job."""
    if config is None:
        config = load_config()

    hour, minute = parse_sync_time(config.sync_time)
    scheduler = BlockingScheduler(timezone=config.resolved_timezone())
    scheduler.add_job(
        job,
        CronTrigger(hour=hour, minute=minute),
        args=[config],
        id="lifelog_sync",
        max_instances=1,
        coalesce=True,
    )
    logger.info(f"Scheduled lifelog sync at {hour:02d}:{minute:02d}")
    return scheduler
