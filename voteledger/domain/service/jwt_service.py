"""JWT token domain service."""

from uuid import UUID

import logfire

from voteledger.config import AuthSettings
from voteledger.domain.value import UserId
from voteledger.util.jwt import JWTError, TokenPayload, verify_token


class JWTService:
    """Domain service for verifying tokens issued by the auth service."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

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

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Extract user ID from JWT token without raising exceptions.

        Args:
            token: JWT token string (optional)

        Returns:
            User ID if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
        except JWTError:
            return None

        try:
            return UserId(UUID(payload.user_id))
        except ValueError:
            logfire.warn("JWT user_id is not a UUID", user_id=payload.user_id)
            return None
