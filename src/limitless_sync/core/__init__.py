"""Functional core - pure business logic with no I/O."""

from .lifelogs import ContentNode, LogRecord, NodeKind
from .formatter import format_day, format_lifelog, format_timestamp
from .sync_cursor import (
    dates_to_sync,
    latest_synced_date,
    parse_synced_date,
    sync_start_date,
    synced_filename,
)
from .retry import RetryPolicy, retry_delay

__all__ = [
    # Lifelogs
    "ContentNode",
    "LogRecord",
    "NodeKind",
    # Formatting
    "format_day",
    "format_lifelog",
    "format_timestamp",
    # Sync cursor
    "dates_to_sync",
    "latest_synced_date",
    "parse_synced_date",
    "sync_start_date",
    "synced_filename",
    # Retry
    "RetryPolicy",
    "retry_delay",
]
