"""Image storage interface.

Images are addressed by a key derived from the owning entity and are
retrievable through the download URL returned by ``upload``.
"""

from comicraft.domain.value import CommunityId, ImageData, PostId


def post_image_key(post_id: PostId) -> str:
    """Storage key of a post's image."""
    return f"posts/{post_id}/image"


def community_image_key(community_id: CommunityId) -> str:
    """Storage key of a community's image."""
    return f"communities/{community_id}/image"


class ImageStorage:
    """Generic image storage interface for all backends."""

    async def upload(self, key: str, image: ImageData) -> str:
        """Store an image under ``key``.

        Args:
            key: Object key (path) in storage
            image: Image bytes and content type

        Returns:
            Download URL of the stored image

        Raises:
            StorageError: If the upload fails
        """
        raise NotImplementedError

    async def delete(self, key: str) -> None:
        """Delete the image stored under ``key``.

        Deleting a missing key is not an error.

        Raises:
            StorageError: If the delete fails
        """
        raise NotImplementedError
