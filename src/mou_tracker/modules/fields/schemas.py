"""
Field Schemas

Response schemas for the field-of-study endpoints.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from mou_tracker.modules.courses.schemas import CourseResponse


class FieldLink(BaseModel):
    """A field rendered as a link to its course listing."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    name_of_the_field: str = Field(..., alias="nameOfTheField")
    count: int
    link: str


class FieldResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    name_of_the_field: str = Field(..., alias="nameOfTheField")
    count: int


class FieldListResponse(BaseModel):
    """Response for GET /fields."""

    success: bool = True
    count: int
    data: list[FieldLink]


class FieldCoursesResponse(BaseModel):
    """Response for GET /fields/{field_id}."""

    success: bool = True
    field: FieldResponse
    coursesCount: int
    courses: list[CourseResponse]
