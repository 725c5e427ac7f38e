"""Community and membership routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel, Field

from comicraft.adapter.error import StorageError
from comicraft.application.usecase.community import (
    CreateCommunityRequest,
    CreateCommunityResponse,
    CreateCommunityUseCase,
    GetCommunityRequest,
    GetCommunityResponse,
    GetCommunityUseCase,
    JoinCommunityRequest,
    JoinCommunityResponse,
    JoinCommunityUseCase,
    LeaveCommunityRequest,
    LeaveCommunityResponse,
    LeaveCommunityUseCase,
    ListTopCommunitiesRequest,
    ListTopCommunitiesResponse,
    ListTopCommunitiesUseCase,
    UpdateCommunityImageRequest,
    UpdateCommunityImageResponse,
    UpdateCommunityImageUseCase,
)
from comicraft.config import Settings
from comicraft.domain.error import (
    AlreadyMemberError,
    CommunityAlreadyExistsError,
    InvalidCommunityNameError,
    NotAuthorizedError,
    NotFoundError,
    NotMemberError,
)
from comicraft.domain.service import JWTService
from comicraft.domain.value import ImageData, PrivacyType
from comicraft.interface.api.auth import require_user

router = APIRouter(prefix="/communities", tags=["communities"], route_class=DishkaRoute)


class CreateCommunityAPIRequest(BaseModel):
    """API request for creating a community."""

    name: str = Field(min_length=1, max_length=100)
    privacy_type: PrivacyType = PrivacyType.PUBLIC


class UpdateImageAPIRequest(BaseModel):
    """API request carrying an image as a base64 data URL."""

    image: str = Field(min_length=1)


@router.post(
    "", response_model=CreateCommunityResponse, status_code=status.HTTP_201_CREATED
)
async def create_community(
    request: CreateCommunityAPIRequest,
    create_community_use_case: FromDishka[CreateCommunityUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommunityResponse:
    """Create a community. The creator becomes its first member and moderator.

    Raises:
        HTTPException: 400 for an invalid name, 409 if the name is taken
    """
    user = require_user(jwt_service, auth_token, "Authentication required to create communities")

    try:
        return await create_community_use_case.execute(
            CreateCommunityRequest(
                name=request.name,
                privacy_type=request.privacy_type,
                user=user,
            )
        )
    except InvalidCommunityNameError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except CommunityAlreadyExistsError as e:
        logfire.warn("Community name taken", name=request.name)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.get("", response_model=ListTopCommunitiesResponse)
async def list_top_communities(
    list_top_use_case: FromDishka[ListTopCommunitiesUseCase],
    settings: FromDishka[Settings],
    limit: int | None = Query(default=None, ge=1, le=100),
) -> ListTopCommunitiesResponse:
    """List the communities with the most members."""
    return await list_top_use_case.execute(
        ListTopCommunitiesRequest(limit=limit or settings.communities.top_communities_limit)
    )


@router.get("/{community_id}", response_model=GetCommunityResponse)
async def get_community(
    community_id: str,
    get_community_use_case: FromDishka[GetCommunityUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetCommunityResponse:
    """Get a community by name.

    Raises:
        HTTPException: 404 if the community doesn't exist
    """
    user = jwt_service.get_current_user(auth_token)
    result = await get_community_use_case.execute(
        GetCommunityRequest(
            community_id=community_id,
            user_id=user.user_id if user else None,
        )
    )
    if not result:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Community not found: {community_id}",
        )
    return result


@router.post("/{community_id}/join", response_model=JoinCommunityResponse)
async def join_community(
    community_id: str,
    join_use_case: FromDishka[JoinCommunityUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> JoinCommunityResponse:
    """Join a community.

    Raises:
        HTTPException: 404 if the community doesn't exist, 409 if already a member
    """
    user = require_user(jwt_service, auth_token, "Authentication required to join communities")

    try:
        return await join_use_case.execute(
            JoinCommunityRequest(community_id=community_id, user=user)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except AlreadyMemberError as e:
        logfire.warn("Duplicate join", community_id=community_id, user_id=user.user_id)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.delete("/{community_id}/join", response_model=LeaveCommunityResponse)
async def leave_community(
    community_id: str,
    leave_use_case: FromDishka[LeaveCommunityUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> LeaveCommunityResponse:
    """Leave a community.

    Raises:
        HTTPException: 409 if the user is not a member
    """
    user = require_user(jwt_service, auth_token, "Authentication required to leave communities")

    try:
        return await leave_use_case.execute(
            LeaveCommunityRequest(community_id=community_id, user=user)
        )
    except NotMemberError as e:
        logfire.warn("Leave without membership", community_id=community_id)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.put("/{community_id}/image", response_model=UpdateCommunityImageResponse)
async def update_community_image(
    community_id: str,
    request: UpdateImageAPIRequest,
    update_image_use_case: FromDishka[UpdateCommunityImageUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateCommunityImageResponse:
    """Change a community's image. Only its creator may do this.

    Raises:
        HTTPException: 400 for a malformed image, 403 if not the creator,
            404 if the community doesn't exist, 502 if storage fails
    """
    user = require_user(jwt_service, auth_token, "Authentication required to change images")

    try:
        image = ImageData.from_data_url(request.image)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    try:
        return await update_image_use_case.execute(
            UpdateCommunityImageRequest(community_id=community_id, image=image, user=user)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized community image change", error=str(e))
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except StorageError:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to store community image",
        )
