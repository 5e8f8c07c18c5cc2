"""
Authentication Service

Credential checks for admin login.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from mou_tracker.core.config import settings
from mou_tracker.core.errors import AuthError
from mou_tracker.core.security import create_access_token, verify_password
from mou_tracker.modules.admins.models import Admin
from mou_tracker.modules.admins.repository import AdminRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password."


async def authenticate(db: AsyncSession, email: str, password: str) -> Admin:
    """
    Return the admin for a matching email and password.

    An unknown email and a wrong password raise the same error so the
    response does not reveal which accounts exist.

    Raises:
        AuthError: Invalid credentials (401)
    """
    admin = await AdminRepository.get_by_email(db, email)

    if not admin:
        logger.warning("Login attempt for unknown email")
        raise AuthError(INVALID_CREDENTIALS_MESSAGE)

    if not verify_password(password, admin.password_hash):
        logger.warning(f"Invalid password for admin {admin.id}")
        raise AuthError(INVALID_CREDENTIALS_MESSAGE)

    return admin


def issue_token(admin: Admin) -> tuple[str, int]:
    """Create an access token for `admin`; returns (token, lifetime in seconds)."""
    token = create_access_token(
        subject=str(admin.id),
        additional_claims={"email": admin.email, "name": admin.name},
    )
    return token, settings.access_token_expire_minutes * 60
