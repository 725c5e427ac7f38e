"""Image storage infrastructure providers."""

from dishka import Scope, provide

from comicraft.adapter.storage import S3ImageStorage
from comicraft.config import StorageSettings
from comicraft.domain.service import ImageStorage
from comicraft.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Image storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider (S3 or MinIO)."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_image_storage(self, settings: StorageSettings) -> ImageStorage:
        """Provide S3-backed image storage.

        Raises:
            ValueError: If no bucket is configured
        """
        if not settings.bucket:
            raise ValueError("Storage bucket must be configured")
        return S3ImageStorage(settings)
