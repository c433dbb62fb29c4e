"""
Pydantic schemas for signup, login and the public user view.
"""

from pydantic import ConfigDict, EmailStr, Field, UUID4, field_validator
from typing import Optional
from datetime import datetime

from app.models.user import UserRole
from app.schemas.common import CamelModel, RequestModel


class SignupRequest(RequestModel):
    """Request schema for user registration."""
    # Passwords are hashed exactly as typed
    model_config = ConfigDict(str_strip_whitespace=False)

    email: EmailStr
    password: str = Field(
        ...,
        min_length=6,
        max_length=100,
        description="Password must be 6-100 characters"
    )
    role: UserRole = Field(..., description="Either job_seeker or job_provider")

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


class LoginRequest(RequestModel):
    """Request schema for user login."""
    model_config = ConfigDict(str_strip_whitespace=False)

    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


class UserResponse(CamelModel):
    """Public user view (no sensitive data)."""
    id: UUID4
    email: str
    role: UserRole
    created_at: Optional[datetime] = None


class AuthResponse(CamelModel):
    """Token plus the authenticated user."""
    token: str
    user: UserResponse
