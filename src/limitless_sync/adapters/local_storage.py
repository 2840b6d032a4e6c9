"""Local filesystem storage adapter."""

from pathlib import Path

from limitless_sync.ports.file_storage import StorageScanError


class LocalFileStorage:
    """
    Filesystem-backed storage.

    Implements FileStorage protocol. Paths are used as given, relative
    ones resolve against the working directory.
    """

    def folder_exists(self, path: str) -> bool:
        """Check if a folder exists."""
        return Path(path).expanduser().is_dir()

    def create_folder(self, path: str) -> None:
        """Create a folder, including missing parents."""
        Path(path).expanduser().mkdir(parents=True, exist_ok=True)

    def write_file(self, path: str, content: str) -> None:
        """Write/overwrite a file."""
        Path(path).expanduser().write_text(content, encoding="utf-8")

    def list_files(self, path: str) -> list[str]:
        """List file paths directly inside a folder."""
        folder = Path(path).expanduser()
        try:
            return sorted(str(p) for p in folder.iterdir() if p.is_file())
        except OSError as e:
            raise StorageScanError(f"Cannot list {folder}: {e}") from e
