"""Unit tests for LocalImageStorage."""

from pathlib import Path

import pytest

from quill.adapter.storage import LocalImageStorage


class TestLocalImageStorage:
    """Tests for writing and deleting files on disk."""

    def test_creates_missing_directory(self, tmp_path):
        directory = tmp_path / "uploads" / "images"

        LocalImageStorage(str(directory))

        assert directory.is_dir()

    @pytest.mark.asyncio
    async def test_save_and_delete(self, tmp_path):
        storage = LocalImageStorage(str(tmp_path))

        path = await storage.save("file-1.png", b"png-bytes")

        assert Path(path) == tmp_path / "file-1.png"
        assert Path(path).read_bytes() == b"png-bytes"

        await storage.delete(path)

        assert not Path(path).exists()

    @pytest.mark.asyncio
    async def test_deleting_missing_file_is_not_an_error(self, tmp_path):
        storage = LocalImageStorage(str(tmp_path))

        await storage.delete(str(tmp_path / "gone.png"))
