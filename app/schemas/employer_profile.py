from datetime import datetime
from typing import Optional
from pydantic import Field, UUID4, field_validator

from app.schemas.common import CamelModel, RequestModel, blank_to_none, check_http_url


class EmployerProfileRequest(RequestModel):
    """Body for POST and PUT /employer/profile"""
    company_name: str = Field(..., min_length=1, max_length=200)
    company_description: Optional[str] = Field(None, max_length=2000)
    company_website: Optional[str] = Field(None, max_length=255)
    contact_info: Optional[str] = Field(None, max_length=255)

    @field_validator("company_description", "company_website", "contact_info", mode="before")
    @classmethod
    def empty_optional_text(cls, v):
        return blank_to_none(v)

    @field_validator("company_website")
    @classmethod
    def validate_website(cls, v):
        return check_http_url(v, "Company website")


class EmployerSummary(CamelModel):
    """Public company fields shown alongside a job"""
    company_name: str
    company_description: Optional[str] = None
    company_website: Optional[str] = None
    contact_info: Optional[str] = None


class EmployerProfileResponse(EmployerSummary):
    id: UUID4
    user_id: UUID4
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
