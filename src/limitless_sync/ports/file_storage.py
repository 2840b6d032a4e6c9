"""File storage interface."""

from typing import Protocol


class StorageScanError(Exception):
    """Raised when a folder cannot be listed."""

    pass


class FileStorage(Protocol):
    """Interface for the folder that receives synced markdown files."""

    def folder_exists(self, path: str) -> bool:
        """Check if a folder exists."""
        ...

    def create_folder(self, path: str) -> None:
        """Create a folder, including missing parents."""
        ...

    def write_file(self, path: str, content: str) -> None:
        """Write/overwrite a file."""
        ...

    def list_files(self, path: str) -> list[str]:
        """List file paths in a folder. Raises StorageScanError on failure."""
        ...
