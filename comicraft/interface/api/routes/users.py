"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from comicraft.application.usecase.community import (
    ListSnippetsRequest,
    ListSnippetsResponse,
    ListSnippetsUseCase,
)
from comicraft.domain.service import JWTService
from comicraft.interface.api.auth import require_user

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class CurrentUserResponse(BaseModel):
    """The authenticated user."""

    user_id: str
    email: str
    display_name: str


@router.get("/me", response_model=CurrentUserResponse)
async def get_me(
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CurrentUserResponse:
    """Return the identity carried by the auth token."""
    user = require_user(jwt_service, auth_token, "Not authenticated")
    return CurrentUserResponse(
        user_id=user.user_id,
        email=user.email,
        display_name=user.display_name,
    )


@router.get("/me/snippets", response_model=ListSnippetsResponse)
async def get_my_snippets(
    list_snippets_use_case: FromDishka[ListSnippetsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListSnippetsResponse:
    """List the communities the caller belongs to."""
    user = require_user(jwt_service, auth_token, "Not authenticated")
    return await list_snippets_use_case.execute(ListSnippetsRequest(user_id=user.user_id))
