"""
Authentication Dependency

Bearer-token verification for protected routers. Attach
`Depends(get_current_admin)` at router level so every route behind it
passes through the same check.

- Missing or non-Bearer Authorization header -> 401
- Token present but bad signature, expired, wrong type or bad claims -> 403
"""

import logging
from dataclasses import dataclass
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from mou_tracker.core.errors import AuthError, ForbiddenError
from mou_tracker.core.security import ACCESS_TOKEN_TYPE, decode_token

logger = logging.getLogger(__name__)

# auto_error=False so a missing header reaches us and maps to 401, not FastAPI's 403
security = HTTPBearer(
    auto_error=False,
    description="JWT Bearer token returned by POST /api/login",
)


@dataclass
class AuthenticatedAdmin:
    """
    An admin identified by a valid access token.

    Attributes:
        id: Admin's unique identifier
        email: Admin's email address
        name: Admin's display name
    """

    id: UUID
    email: str
    name: str

    def __str__(self) -> str:
        return f"AuthenticatedAdmin(id={self.id}, email={self.email})"


def _claims_to_admin(payload: dict) -> AuthenticatedAdmin:
    """Build an AuthenticatedAdmin from decoded claims, rejecting malformed ones."""
    if payload.get("type", ACCESS_TOKEN_TYPE) != ACCESS_TOKEN_TYPE:
        logger.warning(f"Rejected token of type {payload.get('type')!r}")
        raise ForbiddenError("This endpoint requires an access token.", "INVALID_TOKEN_TYPE")

    try:
        admin_id = UUID(payload["sub"])
        email = payload["email"]
        name = payload["name"]
    except (KeyError, TypeError, ValueError) as e:
        logger.warning(f"Invalid token claims: {e}")
        raise ForbiddenError(
            "Token contains invalid or missing claims.", "INVALID_TOKEN_CLAIMS"
        ) from e

    return AuthenticatedAdmin(id=admin_id, email=email, name=name)


async def get_current_admin(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> AuthenticatedAdmin:
    """
    FastAPI dependency that validates the bearer token.

    The decoded admin is returned and also stored on request.state.admin
    for downstream consumers such as the rate limiter.

    Raises:
        AuthError 401: No bearer token supplied
        ForbiddenError 403: Token invalid, expired or carrying bad claims
    """
    if credentials is None or not credentials.credentials:
        raise AuthError("Authentication token is required.", "MISSING_TOKEN")

    payload = decode_token(credentials.credentials)
    if payload is None:
        logger.warning(f"Invalid or expired token presented on {request.url.path}")
        raise ForbiddenError()

    admin = _claims_to_admin(payload)
    request.state.admin = admin
    request.state.admin_id = str(admin.id)

    logger.debug(f"Authenticated admin: {admin.id} ({admin.email})")
    return admin


__all__ = ["AuthenticatedAdmin", "get_current_admin", "security"]
