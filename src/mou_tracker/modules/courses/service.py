"""
Course Service Layer

Creating a course also records it against its field's aggregate counter,
in the same transaction as the course insert.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mou_tracker.core.errors import ConflictError
from mou_tracker.modules.courses import repository
from mou_tracker.modules.courses.models import CompletionStatus, Course
from mou_tracker.modules.courses.schemas import CourseCreate
from mou_tracker.modules.fields.repository import FieldRepository

logger = logging.getLogger(__name__)


class DuplicateCourseError(ConflictError):
    """Raised when a course with the same ID already exists."""

    def __init__(self, course_code: str):
        super().__init__(
            message=f"Course with ID '{course_code}' already exists",
            error_code="DUPLICATE_COURSE",
        )


async def list_running_courses(db: AsyncSession) -> list[Course]:
    return await repository.list_by_completion(db, CompletionStatus.NO)


async def list_completed_courses(db: AsyncSession) -> list[Course]:
    return await repository.list_by_completion(db, CompletionStatus.YES)


async def create_course(db: AsyncSession, data: CourseCreate) -> Course:
    """
    Create a course and bump its field's counter.

    Shape and date-order validation has already happened in CourseCreate,
    so an invalid request never reaches the counter.

    Raises:
        DuplicateCourseError: If the ID is taken (including a concurrent insert)
    """
    if await repository.get_by_code(db, data.course_code):
        logger.warning(f"Duplicate course rejected: {data.course_code}")
        raise DuplicateCourseError(data.course_code)

    field = await FieldRepository.increment_or_create(db, data.field)

    try:
        course = await repository.add(
            db,
            course_code=data.course_code,
            name=data.name,
            eligible_departments=data.eligible_departments,
            start_date=data.start_date,
            end_date=data.end_date,
            completed=data.completed,
            field=field.name_of_the_field,
        )
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning(f"Concurrent duplicate course rejected: {data.course_code}")
        raise DuplicateCourseError(data.course_code) from e

    await db.refresh(course)
    logger.info(f"Created course {course.id} ({course.course_code}) in field '{course.field}'")
    return course
