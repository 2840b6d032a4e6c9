"""Tests for sync cursor logic."""

from datetime import date

from limitless_sync.core.sync_cursor import (
    dates_to_sync,
    latest_synced_date,
    parse_synced_date,
    sync_start_date,
    synced_filename,
)


class TestParseSyncedDate:
    def test_plain_name(self):
        assert parse_synced_date("2025-03-01.md") == date(2025, 3, 1)

    def test_full_path(self):
        assert parse_synced_date("/vault/Limitless Lifelogs/2025-03-01.md") == date(2025, 3, 1)

    def test_windows_path(self):
        assert parse_synced_date("C:\\vault\\2025-03-01.md") == date(2025, 3, 1)

    def test_rejects_other_names(self):
        assert parse_synced_date("notes.md") is None
        assert parse_synced_date("2025-03-01.txt") is None
        assert parse_synced_date("2025-03-01.md.bak") is None
        assert parse_synced_date("x2025-03-01.md") is None
        assert parse_synced_date("2025-3-1.md") is None

    def test_rejects_trailing_newline(self):
        assert parse_synced_date("2025-03-01.md\n") is None
        assert latest_synced_date(["2025-03-01.md", "2025-03-09.md\n"]) == date(2025, 3, 1)

    def test_rejects_impossible_dates(self):
        assert parse_synced_date("2025-13-01.md") is None
        assert parse_synced_date("2025-02-30.md") is None


class TestLatestSyncedDate:
    def test_picks_maximum_and_ignores_others(self):
        names = ["folder/2025-03-01.md", "folder/2025-03-03.md", "folder/notes.md"]
        assert latest_synced_date(names) == date(2025, 3, 3)

    def test_order_does_not_matter(self):
        assert latest_synced_date(["2025-03-03.md", "2024-12-31.md"]) == date(2025, 3, 3)

    def test_none_when_nothing_matches(self):
        assert latest_synced_date([]) is None
        assert latest_synced_date(["notes.md"]) is None


class TestSyncStartDate:
    def test_resumes_from_last_synced_day(self):
        assert sync_start_date(date(2025, 3, 3), date(2025, 2, 9)) == date(2025, 3, 3)

    def test_falls_back_to_default(self):
        assert sync_start_date(None, date(2025, 2, 9)) == date(2025, 2, 9)


class TestDatesToSync:
    def test_inclusive_range_across_month(self):
        assert list(dates_to_sync(date(2025, 2, 27), date(2025, 3, 2))) == [
            date(2025, 2, 27),
            date(2025, 2, 28),
            date(2025, 3, 1),
            date(2025, 3, 2),
        ]

    def test_single_day(self):
        assert list(dates_to_sync(date(2025, 3, 1), date(2025, 3, 1))) == [date(2025, 3, 1)]

    def test_start_after_end_is_empty(self):
        assert list(dates_to_sync(date(2025, 3, 2), date(2025, 3, 1))) == []


def test_synced_filename():
    assert synced_filename(date(2025, 3, 1)) == "2025-03-01.md"
