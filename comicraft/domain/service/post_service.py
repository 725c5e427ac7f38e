"""Post domain service."""

from uuid import uuid4

import logfire

from comicraft.adapter.error import StorageError
from comicraft.domain.error import (
    NotAuthorizedError,
    NotFoundError,
    NotMemberError,
    PostImageUploadError,
)
from comicraft.domain.model.common import utcnow
from comicraft.domain.model.community import Community
from comicraft.domain.model.post import Post
from comicraft.domain.repository import (
    CommunityRepository,
    PostRepository,
    SnippetRepository,
    UnitOfWork,
    VoteRepository,
)
from comicraft.domain.value import CommunityId, CurrentUser, ImageData, PostId

from .base import Service
from .image_storage import ImageStorage, post_image_key


class PostService(Service):
    """Domain service for post submission and removal."""

    def __init__(
        self,
        post_repository: PostRepository,
        vote_repository: VoteRepository,
        community_repository: CommunityRepository,
        snippet_repository: SnippetRepository,
        unit_of_work: UnitOfWork,
        image_storage: ImageStorage,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            vote_repository: Vote repository
            community_repository: Community repository
            snippet_repository: Snippet repository (membership checks)
            unit_of_work: Atomic scope for compound writes
            image_storage: Storage for post images
        """
        self.post_repository = post_repository
        self.vote_repository = vote_repository
        self.community_repository = community_repository
        self.snippet_repository = snippet_repository
        self.unit_of_work = unit_of_work
        self.image_storage = image_storage

    async def _get_community(self, community_id: CommunityId) -> Community:
        community = await self.community_repository.find_by_id(community_id)
        if not community:
            raise NotFoundError("Community", community_id)
        return community

    async def _is_member(self, user: CurrentUser | None, community_id: CommunityId) -> bool:
        if user is None:
            return False
        snippet = await self.snippet_repository.find(user.user_id, community_id)
        return snippet is not None

    async def create_post(
        self,
        community_id: CommunityId,
        author: CurrentUser,
        title: str,
        body: str = "",
        image: ImageData | None = None,
    ) -> Post:
        """Submit a post, optionally with an image.

        The post record, the image upload and the image reference are one
        unit: if the upload fails the post is rolled back, and if the
        reference write fails after a successful upload the stored image is
        deleted again.

        Args:
            community_id: Target community
            author: Authenticated author
            title: Post title
            body: Post body
            image: Optional image to attach

        Returns:
            The saved post

        Raises:
            NotFoundError: If the community doesn't exist
            NotMemberError: If the community only accepts posts from members
            PostImageUploadError: If the image could not be stored
        """
        with logfire.span(
            "post_service.create_post",
            community_id=community_id,
            author_id=author.user_id,
            has_image=image is not None,
        ):
            community = await self._get_community(community_id)

            if community.privacy_type.members_only_posting and not await self._is_member(
                author, community_id
            ):
                logfire.warn(
                    "Non-member post to members-only community",
                    community_id=community_id,
                    user_id=author.user_id,
                )
                raise NotMemberError(community_id, author.user_id)

            post = Post(
                id=PostId(uuid4()),
                community_id=community_id,
                creator_id=author.user_id,
                creator_display_name=author.display_name,
                title=title,
                body=body,
                number_of_comments=0,
                vote_status=0,
                community_image_url=community.image_url,
                created_at=utcnow(),
            )

            async with self.unit_of_work.transaction():
                saved = await self.post_repository.save(post)
                if image is not None:
                    saved = await self._attach_image(saved, image)

            logfire.info(
                "Post created successfully",
                post_id=str(saved.id),
                community_id=community_id,
                has_image=saved.image_url is not None,
            )
            return saved

    async def _attach_image(self, post: Post, image: ImageData) -> Post:
        """Upload a post's image and store its download URL on the post."""
        key = post_image_key(post.id)

        try:
            image_url = await self.image_storage.upload(key, image)
        except StorageError as e:
            logfire.error("Post image upload failed", post_id=str(post.id), error=str(e))
            raise PostImageUploadError(str(post.id), str(e)) from e

        try:
            updated = await self.post_repository.update_image_url(post.id, image_url)
        except Exception as e:
            logfire.error(
                "Post image reference write failed", post_id=str(post.id), error=str(e)
            )
            await self._discard_image(key)
            raise PostImageUploadError(str(post.id), str(e)) from e

        if updated is None:
            await self._discard_image(key)
            raise PostImageUploadError(str(post.id), "post disappeared before image was attached")

        return updated

    async def _discard_image(self, key: str) -> None:
        """Best-effort removal of a stored image; failures are logged."""
        try:
            await self.image_storage.delete(key)
            logfire.info("Stored image discarded", key=key)
        except StorageError as e:
            logfire.error("Failed to discard stored image", key=key, error=str(e))

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def list_community_posts(
        self,
        community_id: CommunityId,
        viewer: CurrentUser | None = None,
        limit: int = 30,
        offset: int = 0,
    ) -> list[Post]:
        """List a community's posts, newest first.

        Posts of private communities are only listed for members.

        Raises:
            NotFoundError: If the community doesn't exist
            NotMemberError: If the community is private and the viewer is not a member
        """
        with logfire.span(
            "post_service.list_community_posts",
            community_id=community_id,
            limit=limit,
            offset=offset,
        ):
            community = await self._get_community(community_id)

            if community.privacy_type.members_only_viewing and not await self._is_member(
                viewer, community_id
            ):
                raise NotMemberError(
                    community_id, viewer.user_id if viewer else "anonymous"
                )

            posts = await self.post_repository.find_by_community(
                community_id, limit=limit, offset=offset
            )
            logfire.info("Posts fetched", community_id=community_id, count=len(posts))
            return posts

    async def delete_post(self, post_id: PostId, user: CurrentUser) -> bool:
        """Delete a post. Only its creator may do this.

        Removes the post's votes and the post in one unit, then its stored
        image if it had one. The image is removed before the request session
        commits, so a failed commit leaves the post without its image.

        Args:
            post_id: Post ID
            user: Authenticated user

        Returns:
            True if the post was deleted

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user is not the post's creator
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), user_id=user.user_id
        ):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                raise NotFoundError("Post", str(post_id))

            if post.creator_id != user.user_id:
                logfire.warn(
                    "Unauthorized post delete attempt",
                    post_id=str(post_id),
                    user_id=user.user_id,
                )
                raise NotAuthorizedError("delete", "post", str(post_id), user.user_id)

            async with self.unit_of_work.transaction():
                removed_votes = await self.vote_repository.delete_by_post(post_id)
                deleted = await self.post_repository.delete(post_id)

            if deleted and post.image_url:
                await self._discard_image(post_image_key(post_id))

            logfire.info(
                "Post deleted",
                post_id=str(post_id),
                deleted=deleted,
                removed_votes=removed_votes,
            )
            return deleted
