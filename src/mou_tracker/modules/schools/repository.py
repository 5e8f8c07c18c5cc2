"""
School Repository

Database operations for partner school aggregates.
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mou_tracker.modules.schools.models import School
from mou_tracker.modules.shared.counters import ensure_aggregate_and_increment

logger = logging.getLogger(__name__)


class SchoolRepository:
    """Repository for school database operations."""

    @staticmethod
    async def increment_or_create(db: AsyncSession, name: str) -> School:
        """
        Record one more MOU for the school called `name`.

        Creates the school with count = 1 if it does not exist yet.
        Flushes only; the caller owns the commit.
        """
        return await ensure_aggregate_and_increment(db, School, School.name, name)

    @staticmethod
    async def get_by_id(db: AsyncSession, school_id: UUID) -> School | None:
        """
        Get a school by ID.

        Args:
            db: Database session
            school_id: School UUID

        Returns:
            School instance or None if not found
        """
        return await db.get(School, school_id)

    @staticmethod
    async def get_by_name(db: AsyncSession, name: str) -> School | None:
        """Get a school by its exact name."""
        result = await db.execute(select(School).where(School.name == name.strip()))
        return result.scalar_one_or_none()

    @staticmethod
    async def list_active(db: AsyncSession) -> list[School]:
        """Schools referenced by at least one MOU, alphabetically."""
        result = await db.execute(select(School).where(School.count > 0).order_by(School.name))
        return list(result.scalars().all())
