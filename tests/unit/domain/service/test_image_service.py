"""Unit tests for ImageService."""

from uuid import uuid4

import pytest

from quill.adapter.storage import InMemoryImageStorage
from quill.config import UploadSettings
from quill.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from quill.domain.repository import NodeRepository
from quill.domain.service import ImageService
from quill.domain.service.image_service import generate_filename
from quill.domain.value import ImageId, NodeId, UserId
from tests.conftest import make_node, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


async def _article(unit_env):
    node_repo = await unit_env.get(NodeRepository)
    author = make_user()
    return author, await node_repo.save(make_node(author))


class TestUpload:
    """Tests for upload."""

    @pytest.mark.asyncio
    async def test_owner_uploads_image(self, unit_env):
        image_service = await unit_env.get(ImageService)
        storage = await unit_env.get(InMemoryImageStorage)
        author, article = await _article(unit_env)

        image = await image_service.upload(
            article.id, author.id, "Holiday.PNG", "image/png", PNG
        )

        assert image.article_id == article.id
        assert image.original_filename == "Holiday.PNG"
        assert image.filename.startswith("file-")
        assert image.filename.endswith(".png")
        assert image.size == len(PNG)
        assert storage.files[image.path] == PNG

    @pytest.mark.asyncio
    async def test_rejects_unsupported_type(self, unit_env):
        image_service = await unit_env.get(ImageService)
        author, article = await _article(unit_env)

        with pytest.raises(ValidationError):
            await image_service.upload(
                article.id, author.id, "notes.txt", "text/plain", b"hello"
            )

    @pytest.mark.asyncio
    async def test_rejects_oversized_file(self, unit_env):
        image_service = await unit_env.get(ImageService)
        settings = await unit_env.get(UploadSettings)
        author, article = await _article(unit_env)

        with pytest.raises(ValidationError):
            await image_service.upload(
                article.id,
                author.id,
                "huge.png",
                "image/png",
                b"\x00" * (settings.max_size_bytes + 1),
            )

    @pytest.mark.asyncio
    async def test_missing_article_raises_not_found(self, unit_env):
        image_service = await unit_env.get(ImageService)

        with pytest.raises(NotFoundError):
            await image_service.upload(
                NodeId(uuid4()), UserId(uuid4()), "a.png", "image/png", PNG
            )

    @pytest.mark.asyncio
    async def test_non_owner_is_rejected(self, unit_env):
        image_service = await unit_env.get(ImageService)
        _, article = await _article(unit_env)

        with pytest.raises(NotAuthorizedError):
            await image_service.upload(
                article.id, UserId(uuid4()), "a.png", "image/png", PNG
            )


class TestManageImages:
    """Tests for list, get and remove."""

    @pytest.mark.asyncio
    async def test_list_filters_by_article(self, unit_env):
        image_service = await unit_env.get(ImageService)
        node_repo = await unit_env.get(NodeRepository)
        author, first = await _article(unit_env)
        second = await node_repo.save(make_node(author))
        await image_service.upload(first.id, author.id, "a.png", "image/png", PNG)
        await image_service.upload(second.id, author.id, "b.gif", "image/gif", PNG)

        assert len(await image_service.list_images()) == 2
        only_first = await image_service.list_images(first.id)
        assert [i.original_filename for i in only_first] == ["a.png"]

    @pytest.mark.asyncio
    async def test_remove_deletes_row_and_file(self, unit_env):
        image_service = await unit_env.get(ImageService)
        storage = await unit_env.get(InMemoryImageStorage)
        author, article = await _article(unit_env)
        image = await image_service.upload(
            article.id, author.id, "a.png", "image/png", PNG
        )

        await image_service.remove(image.id, author.id)

        assert image.path not in storage.files
        with pytest.raises(NotFoundError):
            await image_service.get_image(image.id)

    @pytest.mark.asyncio
    async def test_remove_by_non_owner_is_rejected(self, unit_env):
        image_service = await unit_env.get(ImageService)
        author, article = await _article(unit_env)
        image = await image_service.upload(
            article.id, author.id, "a.png", "image/png", PNG
        )

        with pytest.raises(NotAuthorizedError):
            await image_service.remove(image.id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_get_missing_image_raises_not_found(self, unit_env):
        image_service = await unit_env.get(ImageService)

        with pytest.raises(NotFoundError):
            await image_service.get_image(ImageId(uuid4()))


def test_generated_filenames_are_unique_and_keep_extension():
    names = {generate_filename("photo.JPEG") for _ in range(20)}

    assert len(names) == 20
    assert all(name.endswith(".jpeg") for name in names)
