"""Image storage adapter."""

from .client import MockImageStorage, S3ImageStorage

__all__ = ["S3ImageStorage", "MockImageStorage"]
