"""
Admin Registration Service Layer

Business logic for the admin registration flow:

1. Submission:
   - Reject an email that already belongs to an admin or any earlier request
   - Store the request as pending with a bcrypt password hash
   - Email the approver a confirm link and a deny link
   - Commit only once the approver email has gone out

2. Decision (confirm or deny link):
   - Unknown request -> 404, already decided -> 400
   - Conditional status update so a request is decided at most once
   - Confirm creates the Admin in the same transaction as the status change
   - The registrant is told the outcome (best effort)
"""

import logging
from collections.abc import Awaitable, Callable
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mou_tracker.core.config import settings
from mou_tracker.core.email import (
    send_registration_approved,
    send_registration_rejected,
    send_registration_request,
)
from mou_tracker.core.errors import ConflictError, DependencyError, NotFoundError, ValidationError
from mou_tracker.core.security import hash_password
from mou_tracker.modules.admins import repository
from mou_tracker.modules.admins.models import PendingAdmin, RegistrationStatus
from mou_tracker.modules.admins.repository import AdminRepository, InvalidStatusTransitionError
from mou_tracker.modules.admins.schemas import RegisterRequest

logger = logging.getLogger(__name__)


class EmailInUseError(ConflictError):
    """Raised when the email belongs to an admin or a registration request."""

    def __init__(self, message: str = "An admin with this email already exists"):
        super().__init__(message=message, error_code="EMAIL_IN_USE")


class PendingAdminNotFoundError(NotFoundError):
    """Raised when a registration request does not exist."""

    def __init__(self, pending_admin_id: UUID | None = None):
        message = (
            f"Registration request {pending_admin_id} not found"
            if pending_admin_id
            else "Registration request not found"
        )
        super().__init__(message=message, error_code="PENDING_ADMIN_NOT_FOUND")


class AlreadyProcessedError(ValidationError):
    """Raised when a registration request has already been decided."""

    def __init__(self, current_status: RegistrationStatus | None = None):
        message = "This registration request has already been processed."
        if current_status:
            message = f"{message} Current status: {current_status.value}"
        super().__init__(message=message, error_code="ALREADY_PROCESSED")


class NotificationError(DependencyError):
    """Raised when the approver email could not be sent."""

    def __init__(self):
        super().__init__(
            message="Could not send the registration email. Please try again later.",
            error_code="EMAIL_DELIVERY_FAILED",
        )


def approver_address(registrant_email: str) -> str:
    """Where confirm/deny links are sent: the configured approver, else the registrant."""
    return settings.registration_approver_email or registrant_email


async def submit_registration(db: AsyncSession, data: RegisterRequest) -> PendingAdmin:
    """
    Record a registration request and notify the approver.

    Args:
        db: Database session
        data: Validated, whitespace-stripped request data

    Returns:
        The committed PendingAdmin

    Raises:
        EmailInUseError: If an admin or a registration request already has the email
        NotificationError: If the approver email fails (nothing is stored)
    """
    email = data.email.lower()

    if await AdminRepository.get_by_email(db, email):
        logger.warning("Registration rejected: email belongs to an existing admin")
        raise EmailInUseError()

    if await repository.get_pending_by_email(db, email):
        logger.warning("Registration rejected: a request for this email already exists")
        raise EmailInUseError("A registration request for this email already exists")

    try:
        pending = await repository.add_pending(
            db,
            name=data.name,
            email=email,
            phone_number=data.phone_number,
            password_hash=hash_password(data.password),
        )
    except IntegrityError as e:
        await db.rollback()
        raise EmailInUseError("A registration request for this email already exists") from e

    sent = await send_registration_request(
        to_email=approver_address(email),
        registrant_name=pending.name,
        registrant_email=pending.email,
        registrant_phone=pending.phone_number,
        pending_admin_id=str(pending.id),
    )
    if not sent:
        await db.rollback()
        logger.error(f"Approver email failed; registration {pending.id} discarded")
        raise NotificationError()

    await db.commit()
    logger.info(f"Registration {pending.id} submitted and approver notified")
    return pending


async def _get_open_request(
    db: AsyncSession, pending_admin_id: UUID, new_status: RegistrationStatus
) -> PendingAdmin:
    pending = await repository.get_pending_by_id(db, pending_admin_id)
    if pending is None:
        raise PendingAdminNotFoundError(pending_admin_id)

    try:
        repository.ensure_transition_allowed(pending.status, new_status)
    except InvalidStatusTransitionError as e:
        logger.warning(f"Registration {pending.id} already processed: {e}")
        raise AlreadyProcessedError(pending.status) from e

    return pending


async def _notify_outcome(
    send: Callable[[str, str], Awaitable[bool]], pending: PendingAdmin
) -> None:
    """Tell the registrant the decision. Failures are logged, never raised."""
    try:
        sent = await send(pending.email, pending.name)
    except Exception as e:
        logger.error(f"Failed to send outcome email for registration {pending.id}: {e}")
        return
    if not sent:
        logger.error(f"Outcome email for registration {pending.id} was not delivered")


async def confirm_registration(db: AsyncSession, pending_admin_id: UUID) -> PendingAdmin:
    """
    Approve a pending registration and create the Admin.

    Raises:
        PendingAdminNotFoundError: Unknown request
        AlreadyProcessedError: Request already approved or rejected (also the
            loser of two concurrent decisions)
        EmailInUseError: An admin with the email exists by now
    """
    pending = await _get_open_request(db, pending_admin_id, RegistrationStatus.APPROVED)

    if await AdminRepository.get_by_email(db, pending.email):
        logger.warning(f"Registration {pending.id} cannot be approved: email already an admin")
        raise EmailInUseError()

    approved = await repository.transition_status(db, pending.id, RegistrationStatus.APPROVED)
    if approved is None:
        await db.rollback()
        raise AlreadyProcessedError()

    try:
        admin = await AdminRepository.create(
            db,
            name=approved.name,
            email=approved.email,
            phone_number=approved.phone_number,
            password_hash=approved.password_hash,
        )
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        raise EmailInUseError() from e

    logger.info(f"Registration {approved.id} approved; admin {admin.id} created")
    await _notify_outcome(send_registration_approved, approved)
    return approved


async def deny_registration(db: AsyncSession, pending_admin_id: UUID) -> PendingAdmin:
    """
    Reject a pending registration. No admin is created.

    Raises:
        PendingAdminNotFoundError: Unknown request
        AlreadyProcessedError: Request already approved or rejected
    """
    pending = await _get_open_request(db, pending_admin_id, RegistrationStatus.REJECTED)

    rejected = await repository.transition_status(db, pending.id, RegistrationStatus.REJECTED)
    if rejected is None:
        await db.rollback()
        raise AlreadyProcessedError()

    await db.commit()

    logger.info(f"Registration {rejected.id} rejected")
    await _notify_outcome(send_registration_rejected, rejected)
    return rejected
