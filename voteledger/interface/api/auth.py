"""Request authentication helpers."""

from fastapi import Request

from voteledger.domain.service import JWTService
from voteledger.domain.value import UserId
from voteledger.interface.error import NotAuthenticatedError


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def require_user_id(
    jwt_service: JWTService, request: Request, action: str = "vote"
) -> UserId:
    """Resolve the authenticated voter from cookie or bearer header.

    The cookie is looked up under ``auth.cookie_name``. It wins when both
    are present.

    Raises:
        NotAuthenticatedError: If neither carries a valid token
    """
    cookie_token = request.cookies.get(jwt_service.auth_settings.cookie_name)
    header_token = bearer_token(request.headers.get("authorization"))

    user_id = jwt_service.get_user_id_from_token(cookie_token or header_token)
    if not user_id:
        raise NotAuthenticatedError(f"Authentication required to {action}")
    return user_id
