"""Image file storage backends."""

import asyncio
from pathlib import Path

import logfire

from quill.domain.service.image_service import ImageStorage


class LocalImageStorage(ImageStorage):
    """Stores uploaded files in a directory on the local disk."""

    def __init__(self, directory: str) -> None:
        """Initialize local storage, creating the directory if needed.

        Args:
            directory: Directory uploaded files are written to
        """
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    async def save(self, filename: str, data: bytes) -> str:
        """Write a file and return its path."""
        path = self.directory / filename
        await asyncio.to_thread(path.write_bytes, data)
        logfire.info("Image file written", path=str(path), size=len(data))
        return str(path)

    async def delete(self, path: str) -> None:
        """Delete a file; a file that is already gone is not an error."""
        await asyncio.to_thread(Path(path).unlink, missing_ok=True)
        logfire.info("Image file deleted", path=path)


class InMemoryImageStorage(ImageStorage):
    """Keeps files in a dict, for tests."""

    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}
        # Paths whose deletion should fail, to exercise error handling
        self.undeletable: set[str] = set()

    async def save(self, filename: str, data: bytes) -> str:
        path = f"memory://{filename}"
        self.files[path] = data
        return path

    async def delete(self, path: str) -> None:
        if path in self.undeletable:
            raise PermissionError(f"Cannot delete {path}")
        self.files.pop(path, None)
