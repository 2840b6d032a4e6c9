"""Lifelog repository interface."""

from datetime import date
from typing import Protocol

from limitless_sync.core.lifelogs import LogRecord


class LifelogRepository(Protocol):
    """Interface for fetching lifelogs from any backend."""

    def fetch_day(self, target_date: date) -> list[LogRecord]:
        """Fetch every lifelog for a date, in chronological order."""
        ...
