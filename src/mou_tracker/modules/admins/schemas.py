"""
Admin Registration Schemas
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from .models import RegistrationStatus


class RegisterRequest(BaseModel):
    """Request body for POST /admin/register."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    phone_number: str = Field(..., alias="phoneNumber", min_length=1, max_length=30)
    password: str = Field(..., min_length=1, max_length=128)


class RegistrationData(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    status: RegistrationStatus


class RegisterResponse(BaseModel):
    """Response for POST /admin/register."""

    success: bool = True
    message: str = "Registration submitted. An approver has been notified."
    data: RegistrationData


class DecisionData(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    name: str
    email: str
    status: RegistrationStatus
    processed_date: datetime | None = Field(None, alias="processedDate")


class DecisionResponse(BaseModel):
    """Response for the confirm and deny links."""

    success: bool = True
    message: str
    data: DecisionData
