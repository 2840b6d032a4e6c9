"""Tests for the scheduled sync."""

from datetime import date
from unittest.mock import patch

import pytest

from limitless_sync.adapters.limitless_api import FetchError
from limitless_sync.config import Config, ConfigError
from limitless_sync.scheduler import create_scheduler, parse_sync_time, run_scheduled_sync
from limitless_sync.workflows import SyncInProgressError, SyncResult


def fake_job(config):
    pass


class TestParseSyncTime:
    def test_valid(self):
        assert parse_sync_time("06:00") == (6, 0)
        assert parse_sync_time("23:59") == (23, 59)

    @pytest.mark.parametrize("value", ["", "6", "six:00", "24:00", "12:60", "1:2:3"])
    def test_invalid(self, value):
        with pytest.raises(ConfigError, match="SYNC_TIME"):
            parse_sync_time(value)


class TestCreateScheduler:
    def test_registers_daily_job(self):
        config = Config(timezone="UTC", sync_time="07:30")

        scheduler = create_scheduler(config, job=fake_job)

        job = scheduler.get_job("lifelog_sync")
        assert job is not None
        assert job.func is fake_job
        assert job.args == (config,)
        assert job.max_instances == 1
        assert job.coalesce is True
        assert "hour='7'" in str(job.trigger)
        assert "minute='30'" in str(job.trigger)

    def test_invalid_time(self):
        with pytest.raises(ConfigError):
            create_scheduler(Config(timezone="UTC", sync_time="later"))


class TestRunScheduledSync:
    @patch("limitless_sync.scheduler.sync_lifelogs")
    def test_runs_sync(self, mock_sync):
        mock_sync.return_value = SyncResult(start=date(2025, 3, 1), end=date(2025, 3, 1))
        config = Config(api_key="k", timezone="UTC")

        run_scheduled_sync(config)

        mock_sync.assert_called_once()
        assert mock_sync.call_args.args[0] is config

    @pytest.mark.parametrize(
        "error",
        [FetchError("boom", status_code=500), SyncInProgressError("busy"), ConfigError("no key")],
    )
    @patch("limitless_sync.scheduler.sync_lifelogs")
    def test_failures_do_not_escape(self, mock_sync, error):
        mock_sync.side_effect = error

        run_scheduled_sync(Config(api_key="k", timezone="UTC"))

        mock_sync.assert_called_once()
