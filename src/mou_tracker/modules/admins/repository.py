"""
Admin Repository

Database operations for admins and pending registrations.

Status changes on a PendingAdmin go through transition_status, which only
updates a row that is still pending. Two concurrent decisions on the same
request therefore cannot both succeed.
"""

from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Admin, PendingAdmin, RegistrationStatus

# Valid status transitions; approved and rejected are terminal
VALID_STATUS_TRANSITIONS: dict[RegistrationStatus, set[RegistrationStatus]] = {
    RegistrationStatus.PENDING: {
        RegistrationStatus.APPROVED,
        RegistrationStatus.REJECTED,
    },
    RegistrationStatus.APPROVED: set(),
    RegistrationStatus.REJECTED: set(),
}


class InvalidStatusTransitionError(ValueError):
    """Raised when an invalid status transition is attempted."""

    def __init__(
        self,
        current_status: RegistrationStatus,
        new_status: RegistrationStatus,
    ):
        self.current_status = current_status
        self.new_status = new_status
        valid_transitions = VALID_STATUS_TRANSITIONS.get(current_status, set())
        super().__init__(
            f"Invalid status transition: {current_status.value} -> {new_status.value}. "
            f"Valid transitions: {sorted(s.value for s in valid_transitions)}"
        )


def ensure_transition_allowed(
    current_status: RegistrationStatus, new_status: RegistrationStatus
) -> None:
    """Raise InvalidStatusTransitionError unless current -> new is in the table."""
    if new_status not in VALID_STATUS_TRANSITIONS.get(current_status, set()):
        raise InvalidStatusTransitionError(current_status, new_status)


class AdminRepository:
    """Repository for admin database operations."""

    @staticmethod
    async def get_by_email(db: AsyncSession, email: str) -> Admin | None:
        """Get an admin by email (case-insensitive)."""
        result = await db.execute(select(Admin).where(Admin.email == email.lower()))
        return result.scalar_one_or_none()

    @staticmethod
    async def get_by_id(db: AsyncSession, admin_id: UUID) -> Admin | None:
        return await db.get(Admin, admin_id)

    @staticmethod
    async def create(
        db: AsyncSession,
        *,
        name: str,
        email: str,
        phone_number: str,
        password_hash: str,
    ) -> Admin:
        """
        Add an admin to the session and flush.

        The caller commits, so the admin can share a transaction with the
        registration status change that produced it.
        """
        admin = Admin(
            name=name,
            email=email.lower(),
            phone_number=phone_number,
            password_hash=password_hash,
        )
        db.add(admin)
        await db.flush()
        return admin


async def get_pending_by_id(db: AsyncSession, id: UUID) -> PendingAdmin | None:
    """Get a registration request by ID, whatever its status."""
    return await db.get(PendingAdmin, id)


async def get_pending_by_email(db: AsyncSession, email: str) -> PendingAdmin | None:
    """Get the registration request for an email, whatever its status."""
    result = await db.execute(select(PendingAdmin).where(PendingAdmin.email == email.lower()))
    return result.scalar_one_or_none()


async def add_pending(
    db: AsyncSession,
    *,
    name: str,
    email: str,
    phone_number: str,
    password_hash: str,
) -> PendingAdmin:
    """Add a pending registration and flush so its id is available."""
    pending = PendingAdmin(
        name=name,
        email=email.lower(),
        phone_number=phone_number,
        password_hash=password_hash,
        status=RegistrationStatus.PENDING,
    )
    db.add(pending)
    await db.flush()
    return pending


async def transition_status(
    db: AsyncSession,
    id: UUID,
    new_status: RegistrationStatus,
) -> PendingAdmin | None:
    """
    Move a pending registration to `new_status` and stamp processed_date.

    Issues UPDATE ... WHERE status = 'pending' RETURNING, so the row is
    changed at most once no matter how many requests race for it.

    Args:
        db: Database session (not committed here)
        id: PendingAdmin UUID
        new_status: APPROVED or REJECTED

    Returns:
        The updated PendingAdmin, or None if the row was no longer pending

    Raises:
        InvalidStatusTransitionError: If new_status is not reachable from pending
    """
    ensure_transition_allowed(RegistrationStatus.PENDING, new_status)

    stmt = (
        update(PendingAdmin)
        .where(
            PendingAdmin.id == id,
            PendingAdmin.status == RegistrationStatus.PENDING,
        )
        .values(status=new_status, processed_date=func.now(), updated_at=func.now())
        .returning(PendingAdmin)
        .execution_options(populate_existing=True)
    )
    result = await db.scalars(stmt)
    return result.one_or_none()
