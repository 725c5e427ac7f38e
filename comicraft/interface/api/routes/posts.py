"""Post routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel, Field

from comicraft.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
)
from comicraft.domain.error import (
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    NotMemberError,
    PostImageUploadError,
)
from comicraft.domain.service import JWTService
from comicraft.domain.value import ImageData
from comicraft.interface.api.auth import require_user

router = APIRouter(tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=300)
    body: str = Field(default="", max_length=40000)
    image: str | None = None  # Base64 data URL ('data:image/png;base64,...')


@router.post(
    "/communities/{community_id}/posts",
    response_model=CreatePostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    community_id: str,
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreatePostResponse:
    """Submit a post to a community, optionally with an image.

    Requires authentication.

    Args:
        community_id: Community name
        request: Post content
        create_post_use_case: Create post use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created post details

    Raises:
        HTTPException: If not authenticated, not allowed to post, the
            community is missing, or the image could not be stored
    """
    user = require_user(jwt_service, auth_token, "Authentication required to create posts")

    image = None
    if request.image:
        try:
            image = ImageData.from_data_url(request.image)
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                community_id=community_id,
                title=request.title,
                body=request.body,
                image=image,
                user=user,
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotMemberError as e:
        logfire.warn("Post refused for non-member", community_id=community_id)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except PostImageUploadError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
    except DomainError as e:
        logfire.warn("Post creation domain error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/communities/{community_id}/posts", response_model=ListPostsResponse)
async def list_posts(
    community_id: str,
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int = Query(default=30, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListPostsResponse:
    """List a community's posts, newest first.

    Raises:
        HTTPException: 404 if the community doesn't exist, 403 if it is
            private and the caller is not a member
    """
    user = jwt_service.get_current_user(auth_token)

    try:
        return await list_posts_use_case.execute(
            ListPostsRequest(
                community_id=community_id,
                limit=limit,
                offset=offset,
                user=user,
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotMemberError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))


@router.get("/posts/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetPostResponse:
    """Get a single post.

    Raises:
        HTTPException: 404 if the post doesn't exist
    """
    user = jwt_service.get_current_user(auth_token)
    result = await get_post_use_case.execute(
        GetPostRequest(post_id=str(post_id), user_id=user.user_id if user else None)
    )
    if not result:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    return result


@router.delete("/posts/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeletePostResponse:
    """Delete a post. Only its creator may do this.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not the creator,
            404 if the post doesn't exist
    """
    user = require_user(jwt_service, auth_token, "Authentication required to delete posts")

    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(post_id=str(post_id), user=user)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized post delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this post",
        )
