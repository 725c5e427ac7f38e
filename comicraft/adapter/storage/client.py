"""Object storage clients for images (S3 or any S3-compatible service)."""

import boto3
import logfire
from botocore.client import BaseClient
from botocore.exceptions import BotoCoreError, ClientError
from fastapi.concurrency import run_in_threadpool

from comicraft.adapter.error import StorageError
from comicraft.config import StorageSettings
from comicraft.domain.service.image_storage import ImageStorage
from comicraft.domain.value import ImageData


class S3ImageStorage(ImageStorage):
    """Image storage backed by an S3 bucket.

    boto3 is blocking, so every call runs in the thread pool.
    """

    def __init__(self, settings: StorageSettings, client: BaseClient | None = None):
        """Initialize S3 storage.

        Args:
            settings: Storage settings (bucket, endpoint, credentials)
            client: Pre-built S3 client, built from settings if omitted
        """
        self.bucket = settings.bucket
        self.base_url = settings.download_base_url
        self.client = client or boto3.client(
            "s3",
            endpoint_url=settings.endpoint_url,
            region_name=settings.region,
            aws_access_key_id=settings.access_key_id,
            aws_secret_access_key=settings.secret_access_key,
        )

    def url_for(self, key: str) -> str:
        """Download URL of the object stored under ``key``."""
        return f"{self.base_url}/{key}"

    async def upload(self, key: str, image: ImageData) -> str:
        with logfire.span("s3.upload", bucket=self.bucket, key=key, size=len(image.content)):
            try:
                await run_in_threadpool(
                    self.client.put_object,
                    Bucket=self.bucket,
                    Key=key,
                    Body=image.content,
                    ContentType=image.content_type,
                )
            except (BotoCoreError, ClientError) as e:
                logfire.error("S3 upload failed", key=key, error=str(e))
                raise StorageError(f"Failed to upload {key}: {e}") from e

            logfire.info("Image uploaded", key=key)
            return self.url_for(key)

    async def delete(self, key: str) -> None:
        with logfire.span("s3.delete", bucket=self.bucket, key=key):
            try:
                await run_in_threadpool(
                    self.client.delete_object, Bucket=self.bucket, Key=key
                )
            except (BotoCoreError, ClientError) as e:
                logfire.error("S3 delete failed", key=key, error=str(e))
                raise StorageError(f"Failed to delete {key}: {e}") from e

            logfire.info("Image deleted", key=key)


class MockImageStorage(ImageStorage):
    """In-memory image storage for testing.

    Set ``fail_uploads`` or ``fail_deletes`` to simulate an unavailable
    storage service.
    """

    def __init__(self, base_url: str = "https://images.test"):
        self.base_url = base_url
        self.objects: dict[str, ImageData] = {}
        self.fail_uploads = False
        self.fail_deletes = False

    async def upload(self, key: str, image: ImageData) -> str:
        if self.fail_uploads:
            raise StorageError(f"Failed to upload {key}: storage unavailable")
        self.objects[key] = image
        return f"{self.base_url}/{key}"

    async def delete(self, key: str) -> None:
        if self.fail_deletes:
            raise StorageError(f"Failed to delete {key}: storage unavailable")
        self.objects.pop(key, None)
