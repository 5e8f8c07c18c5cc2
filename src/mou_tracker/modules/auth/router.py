"""Authentication router."""

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from mou_tracker.core.database import get_db
from mou_tracker.core.rate_limit import rate_limit
from mou_tracker.modules.auth import service
from mou_tracker.modules.auth.schemas import AdminProfile, LoginRequest, LoginResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=LoginResponse, summary="Admin Login")
@rate_limit(limit=10, window_seconds=60)
async def login(
    request: Request,
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db),
) -> LoginResponse:
    """
    Authenticate an admin and return a bearer token.

    Args:
        request: Incoming request (used for rate limiting)
        credentials: Email and password
        db: Database session

    Returns:
        Access token, its lifetime and the admin's profile

    Raises:
        401: Invalid email or password
        429: Too many login attempts
    """
    admin = await service.authenticate(db, credentials.email, credentials.password)
    token, expires_in = service.issue_token(admin)

    logger.info(f"Admin logged in: {admin.id}")

    return LoginResponse(
        token=token,
        expires_in=expires_in,
        data=AdminProfile.model_validate(admin),
    )
