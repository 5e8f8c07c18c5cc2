"""
Courses Router

Endpoints:
- GET /courses/running - Courses not yet completed
- GET /courses/completed - Completed courses
- POST /courses - Create a course (and update its field's counter)

All endpoints require a bearer token.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from mou_tracker.core.auth import get_current_admin
from mou_tracker.core.database import get_db
from mou_tracker.modules.courses import service
from mou_tracker.modules.courses.models import Course
from mou_tracker.modules.courses.schemas import (
    CourseCreate,
    CourseCreateResponse,
    CourseListResponse,
    CourseResponse,
)

router = APIRouter(dependencies=[Depends(get_current_admin)])


def _to_list_response(courses: list[Course]) -> CourseListResponse:
    return CourseListResponse(
        count=len(courses),
        data=[CourseResponse.model_validate(course) for course in courses],
    )


@router.get("/running", response_model=CourseListResponse, summary="List Running Courses")
async def list_running_courses(db: AsyncSession = Depends(get_db)) -> CourseListResponse:
    return _to_list_response(await service.list_running_courses(db))


@router.get("/completed", response_model=CourseListResponse, summary="List Completed Courses")
async def list_completed_courses(db: AsyncSession = Depends(get_db)) -> CourseListResponse:
    return _to_list_response(await service.list_completed_courses(db))


@router.post(
    "",
    response_model=CourseCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Course",
    description="""
Create a new training course.

`eligibleDepartments` must be a non-empty list, both dates must parse and
`startDate` must be before `endDate`. `completed` defaults to "no".
The first course in a field creates that Field with count 1; later
courses increment it.

**Errors:**
- 400: missing field, empty department list, bad date or date order
- 409: a course with the same ID already exists
""",
)
async def create_course(
    data: CourseCreate,
    db: AsyncSession = Depends(get_db),
) -> CourseCreateResponse:
    course = await service.create_course(db, data)
    return CourseCreateResponse(data=CourseResponse.model_validate(course))
