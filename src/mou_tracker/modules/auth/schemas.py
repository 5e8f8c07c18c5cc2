"""Authentication schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Login request schema."""

    model_config = ConfigDict(str_strip_whitespace=True)

    # Not EmailStr: an unknown address of any shape gets the generic 401
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AdminProfile(BaseModel):
    """Admin details returned on login."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str


class LoginResponse(BaseModel):
    """Login response schema."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    token: str
    token_type: str = Field("bearer", alias="tokenType")
    expires_in: int = Field(..., alias="expiresIn", description="Token lifetime in seconds")
    data: AdminProfile
