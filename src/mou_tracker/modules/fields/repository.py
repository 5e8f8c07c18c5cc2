"""
Field Repository

Database operations for field-of-study aggregates.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mou_tracker.modules.fields.models import Field
from mou_tracker.modules.shared.counters import ensure_aggregate_and_increment


class FieldRepository:
    """Repository for field database operations."""

    @staticmethod
    async def increment_or_create(db: AsyncSession, name: str) -> Field:
        """Record one more course in field `name`, creating it at count = 1 if new."""
        return await ensure_aggregate_and_increment(db, Field, Field.name_of_the_field, name)

    @staticmethod
    async def get_by_id(db: AsyncSession, field_id: UUID) -> Field | None:
        return await db.get(Field, field_id)

    @staticmethod
    async def list_all(db: AsyncSession) -> list[Field]:
        result = await db.execute(select(Field).order_by(Field.name_of_the_field))
        return list(result.scalars().all())
