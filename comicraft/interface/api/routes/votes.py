"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel

from comicraft.application.usecase.vote import (
    ListVotesRequest,
    ListVotesResponse,
    ListVotesUseCase,
    VotePostRequest,
    VotePostResponse,
    VotePostUseCase,
)
from comicraft.domain.error import BusinessRuleViolationError, NotFoundError, ValidationError
from comicraft.domain.service import JWTService
from comicraft.domain.value import VoteValue
from comicraft.interface.api.auth import require_user

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for voting on a post."""

    value: VoteValue  # 1 (up) or -1 (down)
    community_id: str | None = None


@router.post("/posts/{post_id}/vote", response_model=VotePostResponse)
async def vote_post(
    post_id: UUID,
    request: VoteAPIRequest,
    vote_use_case: FromDishka[VotePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VotePostResponse:
    """Up- or downvote a post.

    Voting the same way twice removes the vote; voting the other way
    flips it. Requires authentication.

    Args:
        post_id: Post UUID
        request: Vote value
        vote_use_case: Vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        New tally and the caller's current vote

    Raises:
        HTTPException: If not authenticated or post not found
    """
    user = require_user(jwt_service, auth_token, "Authentication required to vote")

    try:
        return await vote_use_case.execute(
            VotePostRequest(
                post_id=str(post_id),
                value=request.value,
                community_id=request.community_id,
                user=user,
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except BusinessRuleViolationError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.get("/communities/{community_id}/votes", response_model=ListVotesResponse)
async def list_votes(
    community_id: str,
    list_votes_use_case: FromDishka[ListVotesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListVotesResponse:
    """List the caller's votes on posts of a community."""
    user = require_user(jwt_service, auth_token, "Authentication required to list votes")
    return await list_votes_use_case.execute(
        ListVotesRequest(community_id=community_id, user_id=user.user_id)
    )
