"""Adapters - I/O implementations of ports."""

from .limitless_api import FetchError, LimitlessAPIAdapter, RateLimitExhausted
from .local_storage import LocalFileStorage
from .notifiers import CompositeNotifier, ConsoleNotifier, LogNotifier, TelegramNotifier

__all__ = [
    "LimitlessAPIAdapter",
    "FetchError",
    "RateLimitExhausted",
    "LocalFileStorage",
    "CompositeNotifier",
    "ConsoleNotifier",
    "LogNotifier",
    "TelegramNotifier",
]
