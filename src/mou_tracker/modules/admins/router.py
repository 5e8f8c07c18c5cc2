"""
Admin Registration Router

Public endpoints: the registrant has no account yet, and the approver acts
through the links emailed to them.

Endpoints:
- POST /admin/register - Request an admin account
- GET /admin/verify/yes/{pending_admin_id} - Approve a request
- GET /admin/verify/no/{pending_admin_id} - Deny a request
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from mou_tracker.core.database import get_db
from mou_tracker.core.rate_limit import rate_limit
from mou_tracker.modules.admins import service
from mou_tracker.modules.admins.schemas import (
    DecisionData,
    DecisionResponse,
    RegisterRequest,
    RegisterResponse,
    RegistrationData,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Request Admin Account",
)
@rate_limit(limit=5, window_seconds=300)
async def register(
    request: Request,
    data: RegisterRequest,
    db: AsyncSession = Depends(get_db),
) -> RegisterResponse:
    """
    Submit an admin registration request.

    The approver receives an email with a confirm link and a deny link.

    Raises:
        400: Missing or invalid fields
        409: Email already used by an admin or an earlier registration request
        429: Too many registration attempts
        500: The approver email could not be sent
    """
    pending = await service.submit_registration(db, data)
    return RegisterResponse(data=RegistrationData.model_validate(pending))


@router.get(
    "/verify/yes/{pending_admin_id}",
    response_model=DecisionResponse,
    summary="Approve Admin Registration",
)
async def confirm_registration(
    pending_admin_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> DecisionResponse:
    """
    Approve a registration and create the admin account.

    Raises:
        400: Malformed id, or the request was already processed
        404: Unknown request
        409: Email already belongs to an admin
    """
    approved = await service.confirm_registration(db, pending_admin_id)
    return DecisionResponse(
        message="Registration approved. The admin account is now active.",
        data=DecisionData.model_validate(approved),
    )


@router.get(
    "/verify/no/{pending_admin_id}",
    response_model=DecisionResponse,
    summary="Deny Admin Registration",
)
async def deny_registration(
    pending_admin_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> DecisionResponse:
    """
    Deny a registration.

    Raises:
        400: Malformed id, or the request was already processed
        404: Unknown request
    """
    rejected = await service.deny_registration(db, pending_admin_id)
    return DecisionResponse(
        message="Registration denied.",
        data=DecisionData.model_validate(rejected),
    )
