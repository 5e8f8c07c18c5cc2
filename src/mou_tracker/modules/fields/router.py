"""
Fields Router

Endpoints:
- GET /fields - All fields of study, as links
- GET /fields/{field_id} - Courses in one field

All endpoints require a bearer token.
"""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from mou_tracker.core.auth import get_current_admin
from mou_tracker.core.database import get_db
from mou_tracker.modules.courses.schemas import CourseResponse
from mou_tracker.modules.fields import service
from mou_tracker.modules.fields.schemas import (
    FieldCoursesResponse,
    FieldLink,
    FieldListResponse,
    FieldResponse,
)

router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("", response_model=FieldListResponse, summary="List Fields")
async def list_fields(db: AsyncSession = Depends(get_db)) -> FieldListResponse:
    fields = await service.list_fields(db)
    links = [
        FieldLink(
            id=field.id,
            name_of_the_field=field.name_of_the_field,
            count=field.count,
            link=f"/api/fields/{field.id}",
        )
        for field in fields
    ]
    return FieldListResponse(count=len(links), data=links)


@router.get("/{field_id}", response_model=FieldCoursesResponse, summary="List a Field's Courses")
async def get_field_courses(
    field_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> FieldCoursesResponse:
    field, courses = await service.get_field_courses(db, field_id)
    return FieldCoursesResponse(
        field=FieldResponse.model_validate(field),
        coursesCount=len(courses),
        courses=[CourseResponse.model_validate(course) for course in courses],
    )
