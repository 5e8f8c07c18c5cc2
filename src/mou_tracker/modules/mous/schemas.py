"""
MOU Schemas

Pydantic schemas for request validation and response serialization.
Wire names follow the admin frontend ("ID", "nameOfPartnerInstitution", ...).
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class MOUCreate(BaseModel):
    """Request body for POST /mous."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    mou_code: str = Field(..., alias="ID", min_length=1, max_length=100)
    name_of_partner_institution: str = Field(
        ..., alias="nameOfPartnerInstitution", min_length=1, max_length=200
    )
    strategic_areas: str = Field(..., alias="strategicAreas", min_length=1, max_length=5000)


class MOUResponse(BaseModel):
    """A single MOU as returned by the API."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    mou_code: str = Field(..., alias="ID")
    name_of_partner_institution: str = Field(..., alias="nameOfPartnerInstitution")
    strategic_areas: str = Field(..., alias="strategicAreas")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")


class MOUListResponse(BaseModel):
    """Response for GET /mous."""

    success: bool = True
    count: int
    data: list[MOUResponse]


class MOUCreateResponse(BaseModel):
    """Response for POST /mous."""

    success: bool = True
    message: str = "MOU added successfully"
    data: MOUResponse
