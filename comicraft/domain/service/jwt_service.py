"""JWT token domain service."""

import logfire

from comicraft.config import AuthSettings
from comicraft.domain.value import CurrentUser, UserId
from comicraft.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations.

    Tokens carry the identity issued by the external auth provider.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, email: str) -> str:
        """Create JWT token for user.

        Args:
            user_id: Opaque user ID
            email: User email

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(user_id, email, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
            logfire.debug("JWT token verified", user_id=payload.user_id)
            return payload

    def get_current_user(self, token: str | None) -> CurrentUser | None:
        """Resolve the authenticated user without raising.

        Convenience for API routes that treat a missing or invalid token
        as unauthenticated.

        Args:
            token: JWT token string (optional)

        Returns:
            CurrentUser if token is valid, None otherwise
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
        except JWTError:
            return None
        return CurrentUser(user_id=UserId(payload.user_id), email=payload.email)
