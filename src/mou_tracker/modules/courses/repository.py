"""
Course Repository

Database operations for courses. Writes only flush; the service commits.
"""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import CompletionStatus, Course


async def add(
    db: AsyncSession,
    *,
    course_code: str,
    name: str,
    eligible_departments: list[str],
    start_date: datetime,
    end_date: datetime,
    completed: CompletionStatus,
    field: str,
) -> Course:
    """Stage a new course and flush it so constraint violations surface here."""
    course = Course(
        course_code=course_code,
        name=name,
        eligible_departments=eligible_departments,
        start_date=start_date,
        end_date=end_date,
        completed=completed,
        field=field,
    )
    db.add(course)
    await db.flush()
    return course


async def get_by_code(db: AsyncSession, course_code: str) -> Course | None:
    """Get a course by its business key."""
    result = await db.execute(select(Course).where(Course.course_code == course_code))
    return result.scalar_one_or_none()


async def list_by_completion(db: AsyncSession, completed: CompletionStatus) -> list[Course]:
    """Courses with the given completion flag, by start date."""
    result = await db.execute(
        select(Course).where(Course.completed == completed).order_by(Course.start_date)
    )
    return list(result.scalars().all())


async def list_by_field(db: AsyncSession, field_name: str) -> list[Course]:
    """Courses in the field called `field_name`, by start date."""
    result = await db.execute(
        select(Course).where(Course.field == field_name).order_by(Course.start_date)
    )
    return list(result.scalars().all())
