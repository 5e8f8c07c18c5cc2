"""
School Service Layer

Read-side operations over partner schools.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from mou_tracker.core.errors import NotFoundError
from mou_tracker.modules.mous import repository as mou_repository
from mou_tracker.modules.mous.models import MOU
from mou_tracker.modules.schools.models import School
from mou_tracker.modules.schools.repository import SchoolRepository

logger = logging.getLogger(__name__)


class SchoolNotFoundError(NotFoundError):
    """Raised when a school id does not exist."""

    def __init__(self, school_id: UUID):
        super().__init__(message=f"School {school_id} not found", error_code="SCHOOL_NOT_FOUND")


async def list_active_schools(db: AsyncSession) -> list[School]:
    """Schools with at least one MOU."""
    return await SchoolRepository.list_active(db)


async def get_school_mous(db: AsyncSession, school_id: UUID) -> tuple[School, list[MOU]]:
    """
    Get a school and every MOU signed with it.

    Raises:
        SchoolNotFoundError: If the school does not exist
    """
    school = await SchoolRepository.get_by_id(db, school_id)
    if not school:
        logger.warning(f"School not found: {school_id}")
        raise SchoolNotFoundError(school_id)

    mous = await mou_repository.list_by_partner(db, school.name)
    return school, mous
