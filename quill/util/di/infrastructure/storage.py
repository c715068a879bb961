"""Image storage infrastructure providers."""

from dishka import Scope, provide

from quill.adapter.storage import LocalImageStorage
from quill.config import UploadSettings
from quill.domain.service import ImageStorage
from quill.util.di.base import ProviderBase
from quill.util.error import ConfigurationError


class StorageProvider(ProviderBase):
    """Storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider writing to the local disk."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_image_storage(self, upload_settings: UploadSettings) -> ImageStorage:
        """Provide local image storage.

        Raises:
            ConfigurationError: If the upload directory cannot be created
        """
        try:
            return LocalImageStorage(upload_settings.directory)
        except OSError as e:
            raise ConfigurationError(
                f"Upload directory {upload_settings.directory} is not usable: {e}"
            ) from e
