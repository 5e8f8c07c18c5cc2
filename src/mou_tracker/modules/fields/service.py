"""
Field Service Layer

Read-side operations over fields of study.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from mou_tracker.core.errors import NotFoundError
from mou_tracker.modules.courses import repository as course_repository
from mou_tracker.modules.courses.models import Course
from mou_tracker.modules.fields.models import Field
from mou_tracker.modules.fields.repository import FieldRepository

logger = logging.getLogger(__name__)


class FieldNotFoundError(NotFoundError):
    """Raised when a field id does not exist."""

    def __init__(self, field_id: UUID):
        super().__init__(message=f"Field {field_id} not found", error_code="FIELD_NOT_FOUND")


async def list_fields(db: AsyncSession) -> list[Field]:
    return await FieldRepository.list_all(db)


async def get_field_courses(db: AsyncSession, field_id: UUID) -> tuple[Field, list[Course]]:
    """
    Get a field and every course in it.

    Raises:
        FieldNotFoundError: If the field does not exist
    """
    field = await FieldRepository.get_by_id(db, field_id)
    if not field:
        logger.warning(f"Field not found: {field_id}")
        raise FieldNotFoundError(field_id)

    courses = await course_repository.list_by_field(db, field.name_of_the_field)
    return field, courses
