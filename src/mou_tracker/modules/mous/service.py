"""
MOU Service Layer

Creating an MOU also records it against its partner school's aggregate
counter. Both writes share one transaction: if the MOU insert fails the
increment is rolled back with it.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mou_tracker.core.errors import ConflictError
from mou_tracker.modules.mous import repository
from mou_tracker.modules.mous.models import MOU
from mou_tracker.modules.mous.schemas import MOUCreate
from mou_tracker.modules.schools.repository import SchoolRepository

logger = logging.getLogger(__name__)


class DuplicateMOUError(ConflictError):
    """Raised when an MOU with the same ID already exists."""

    def __init__(self, mou_code: str):
        super().__init__(
            message=f"MOU with ID '{mou_code}' already exists",
            error_code="DUPLICATE_MOU",
        )


async def list_mous(db: AsyncSession) -> list[MOU]:
    """Return every MOU."""
    return await repository.list_all(db)


async def create_mou(db: AsyncSession, data: MOUCreate) -> MOU:
    """
    Create an MOU and bump its partner school's counter.

    Steps:
    1. Reject a duplicate business key before touching any counter
    2. Find-or-create the School and increment its count (atomic upsert)
    3. Insert the MOU
    4. Commit both

    Args:
        db: Database session
        data: Validated, whitespace-stripped request data

    Returns:
        The persisted MOU

    Raises:
        DuplicateMOUError: If the ID is taken (including a concurrent insert)
    """
    if await repository.get_by_code(db, data.mou_code):
        logger.warning(f"Duplicate MOU rejected: {data.mou_code}")
        raise DuplicateMOUError(data.mou_code)

    school = await SchoolRepository.increment_or_create(db, data.name_of_partner_institution)

    try:
        mou = await repository.add(
            db,
            mou_code=data.mou_code,
            name_of_partner_institution=school.name,
            strategic_areas=data.strategic_areas,
        )
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning(f"Concurrent duplicate MOU rejected: {data.mou_code}")
        raise DuplicateMOUError(data.mou_code) from e

    await db.refresh(mou)
    logger.info(f"Created MOU {mou.id} ({mou.mou_code}) with partner '{school.name}'")
    return mou
