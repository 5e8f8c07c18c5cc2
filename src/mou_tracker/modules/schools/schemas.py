"""
School Schemas

Response schemas for the partner-school endpoints.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict

from mou_tracker.modules.mous.schemas import MOUResponse


class SchoolLink(BaseModel):
    """An active school rendered as a link to its MOU listing."""

    id: UUID
    name: str
    count: int
    link: str


class SchoolResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    count: int


class ActiveSchoolsResponse(BaseModel):
    """Response for GET /schools/active."""

    success: bool = True
    count: int
    data: list[SchoolLink]


class SchoolMOUsResponse(BaseModel):
    """Response for GET /schools/{school_id}."""

    success: bool = True
    schoolId: UUID
    school: SchoolResponse
    count: int
    data: list[MOUResponse]
