"""Ports - interfaces/protocols for external dependencies."""

from .lifelog_repo import LifelogRepository
from .file_storage import FileStorage, StorageScanError
from .notifier import Notifier

__all__ = [
    "LifelogRepository",
    "FileStorage",
    "StorageScanError",
    "Notifier",
]
