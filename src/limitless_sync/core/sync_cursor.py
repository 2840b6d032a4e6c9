"""Incremental sync cursor logic - pure functions, no I/O."""

import re
from datetime import date, timedelta
from typing import Iterable, Iterator

SYNCED_FILE_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\.md")


def synced_filename(target_date: date) -> str:
    """Output file name for a calendar day."""
    return f"{target_date.isoformat()}.md"


def parse_synced_date(name: str) -> date | None:
    """Return the date encoded in a YYYY-MM-DD.md file name, or None."""
    base = re.split(r"[\\/]", name)[-1]
    match = SYNCED_FILE_RE.fullmatch(base)
    if not match:
        return None
    try:
        return date.fromisoformat(match.group(1))
    except ValueError:
        return None


def latest_synced_date(names: Iterable[str]) -> date | None:
    """Most recent date among synced file names. None if there are none."""
    dates = [d for d in (parse_synced_date(n) for n in names) if d is not None]
    return max(dates) if dates else None


def sync_start_date(last_synced: date | None, default_start: date) -> date:
    """
    First day to fetch.

    The last synced day is fetched again since it may have been written
    before the device finished uploading it.
    """
    return last_synced if last_synced is not None else default_start


def dates_to_sync(start: date, end: date) -> Iterator[date]:
    """Every calendar day from start to end inclusive, ascending."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
