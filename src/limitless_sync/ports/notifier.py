"""Notification interface."""

from typing import Protocol


class Notifier(Protocol):
    """Interface for progress and error messages shown to the user."""

    def notify(self, message: str) -> None:
        """Deliver a message. Must not raise."""
        ...
