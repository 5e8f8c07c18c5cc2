"""
Course Schemas

Pydantic schemas for request validation and response serialization.
"""

from datetime import UTC, date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from mou_tracker.modules.courses.models import CompletionStatus


class CourseCreate(BaseModel):
    """Request body for POST /courses."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    course_code: str = Field(..., alias="ID", min_length=1, max_length=100)
    name: str = Field(..., alias="Name", min_length=1, max_length=200)
    eligible_departments: list[str] = Field(..., alias="eligibleDepartments", min_length=1)
    start_date: datetime = Field(..., alias="startDate")
    end_date: datetime = Field(..., alias="endDate")
    completed: CompletionStatus = CompletionStatus.NO
    field: str = Field(..., min_length=1, max_length=200)

    @field_validator("eligible_departments")
    @classmethod
    def validate_departments(cls, v: list[str]) -> list[str]:
        """Every department must be a non-blank string."""
        departments = [dept.strip() for dept in v]
        if any(not dept for dept in departments):
            raise ValueError("eligibleDepartments must not contain empty values")
        return departments

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def accept_plain_dates(cls, v):
        """Accept "YYYY-MM-DD" as midnight of that day."""
        if isinstance(v, str) and len(v.strip()) == 10:
            try:
                return datetime.combine(date.fromisoformat(v.strip()), datetime.min.time())
            except ValueError:
                return v
        return v

    @field_validator("start_date", "end_date")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Naive datetimes are taken as UTC so the two dates always compare."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v

    @model_validator(mode="after")
    def validate_date_order(self) -> "CourseCreate":
        if self.start_date >= self.end_date:
            raise ValueError("endDate must be after startDate")
        return self


class CourseResponse(BaseModel):
    """A single course as returned by the API."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    course_code: str = Field(..., alias="ID")
    name: str = Field(..., alias="Name")
    eligible_departments: list[str] = Field(..., alias="eligibleDepartments")
    start_date: datetime = Field(..., alias="startDate")
    end_date: datetime = Field(..., alias="endDate")
    completed: CompletionStatus
    field: str
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")


class CourseListResponse(BaseModel):
    """Response for GET /courses/running and /courses/completed."""

    success: bool = True
    count: int
    data: list[CourseResponse]


class CourseCreateResponse(BaseModel):
    """Response for POST /courses."""

    success: bool = True
    message: str = "Course added successfully"
    data: CourseResponse
