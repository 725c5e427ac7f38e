"""Authentication helpers for routes."""

from fastapi import HTTPException, status

from comicraft.domain.service import JWTService
from comicraft.domain.value import CurrentUser


def require_user(
    jwt_service: JWTService, auth_token: str | None, detail: str
) -> CurrentUser:
    """Resolve the authenticated user or fail with 401.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie
        detail: Message returned when unauthenticated

    Raises:
        HTTPException: If the token is missing or invalid
    """
    user = jwt_service.get_current_user(auth_token)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)
    return user
