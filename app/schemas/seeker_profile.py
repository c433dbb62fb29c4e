"""
Pydantic schemas for job seeker profiles.

The same request body is used for create and update. On update every
collection is replaced by what is submitted, so an omitted collection
becomes empty.
"""

import re
from datetime import datetime
from typing import List, Optional
from pydantic import Field, UUID4, field_validator, model_validator

from app.schemas.common import CamelModel, RequestModel, blank_to_none, check_http_url
from app.schemas.skill import SkillResponse

PHONE_PATTERN = re.compile(r"^\+?[\d\s\-()]+$")


class ProfileSkillInput(RequestModel):
    skill_id: UUID4
    certificate_url: Optional[str] = Field(None, max_length=500)

    @field_validator("certificate_url", mode="before")
    @classmethod
    def empty_certificate(cls, v):
        return blank_to_none(v)

    @field_validator("certificate_url")
    @classmethod
    def validate_certificate_url(cls, v):
        return check_http_url(v, "Certificate URL")


class EmploymentEntryInput(RequestModel):
    company_name: str = Field(..., min_length=1, max_length=200)
    duration: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)

    @field_validator("description", mode="before")
    @classmethod
    def empty_description(cls, v):
        return blank_to_none(v)


class ReferenceInput(RequestModel):
    name: str = Field(..., min_length=1, max_length=100)
    contact: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)

    @field_validator("description", mode="before")
    @classmethod
    def empty_description(cls, v):
        return blank_to_none(v)


class SeekerProfileRequest(RequestModel):
    """Body for POST and PUT /applicant/profile"""
    name: str = Field(..., min_length=1, max_length=100)
    address: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=20)
    education: Optional[str] = Field(None, max_length=500)
    skills: List[ProfileSkillInput] = Field(default_factory=list)
    employment_history: List[EmploymentEntryInput] = Field(default_factory=list)
    references: List[ReferenceInput] = Field(default_factory=list)

    @field_validator("address", "phone", "education", mode="before")
    @classmethod
    def empty_optional_text(cls, v):
        return blank_to_none(v)

    @field_validator("skills", "employment_history", "references", mode="before")
    @classmethod
    def null_collection(cls, v):
        return [] if v is None else v

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not PHONE_PATTERN.match(v):
            raise ValueError("Please enter a valid phone number")
        return v

    @model_validator(mode="after")
    def unique_skills(self):
        seen = set()
        for entry in self.skills:
            if entry.skill_id in seen:
                raise ValueError(f"Skill {entry.skill_id} is listed more than once")
            seen.add(entry.skill_id)
        return self


class ProfileSkillResponse(CamelModel):
    id: UUID4
    skill_id: UUID4
    certificate_url: Optional[str] = None
    skill: SkillResponse


class EmploymentEntryResponse(CamelModel):
    id: UUID4
    company_name: str
    duration: str
    description: Optional[str] = None


class ReferenceResponse(CamelModel):
    id: UUID4
    name: str
    contact: str
    description: Optional[str] = None


class SeekerProfileResponse(CamelModel):
    """Full seeker profile with nested collections"""
    id: UUID4
    user_id: UUID4
    name: str
    address: Optional[str] = None
    phone: Optional[str] = None
    education: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    skills: List[ProfileSkillResponse] = []
    employment_history: List[EmploymentEntryResponse] = []
    references: List[ReferenceResponse] = []
