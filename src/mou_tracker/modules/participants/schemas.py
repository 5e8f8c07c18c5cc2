"""
Candidate Schemas

Pydantic schemas for request validation and response serialization.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class CandidateCreate(BaseModel):
    """Request body for POST /participants. Every field is required."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    phone_number: str = Field(..., alias="phoneNumber", min_length=1, max_length=30)
    gender: str = Field(..., min_length=1, max_length=30)
    designation: str = Field(..., min_length=1, max_length=200)
    department: str = Field(..., min_length=1, max_length=200)
    organization: str = Field(..., min_length=1, max_length=200)


class CandidateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    name: str
    email: str
    phone_number: str = Field(..., alias="phoneNumber")
    gender: str
    designation: str
    department: str
    organization: str
    created_at: datetime = Field(..., alias="createdAt")


class CandidateListResponse(BaseModel):
    """Response for GET /participants."""

    success: bool = True
    count: int
    data: list[CandidateResponse]


class CandidateCreateResponse(BaseModel):
    """Response for POST /participants."""

    success: bool = True
    message: str = "Participant added successfully"
    data: CandidateResponse
