from pydantic import Field, UUID4, field_validator
from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID

from app.models.job import EmploymentType, JobStatus
from app.schemas.common import CamelModel, RequestModel, blank_to_none
from app.schemas.employer_profile import EmployerSummary
from app.schemas.skill import SkillResponse


class JobSort(str, Enum):
    """Feed orderings"""
    RECENT = "recent"
    PAY_ASC = "pay_asc"
    PAY_DESC = "pay_desc"


class JobCreateRequest(RequestModel):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    pay: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    employment_type: EmploymentType
    location: str = Field(..., min_length=1, max_length=200)
    duration: Optional[str] = Field(None, max_length=100)
    required_skills: List[UUID4] = Field(default_factory=list)

    @field_validator("duration", mode="before")
    @classmethod
    def empty_duration(cls, v):
        return blank_to_none(v)

    @field_validator("required_skills", mode="before")
    @classmethod
    def null_skills(cls, v):
        return [] if v is None else v

    @field_validator("required_skills")
    @classmethod
    def collapse_duplicates(cls, v: List) -> List:
        return list(dict.fromkeys(v))


class JobUpdateRequest(JobCreateRequest):
    """Schema for replacing a job. Setting status=CLOSED takes it off the feed."""
    status: Optional[JobStatus] = None


class JobFilters(CamelModel):
    """Parsed feed query parameters"""
    pay_min: Optional[Decimal] = None
    pay_max: Optional[Decimal] = None
    location: Optional[str] = None
    employment_type: Optional[EmploymentType] = None
    skills: List[UUID] = []
    sort: JobSort = JobSort.RECENT


class JobSkillResponse(CamelModel):
    id: UUID4
    skill_id: UUID4
    skill: SkillResponse


class JobResponse(CamelModel):
    """Schema for job response"""
    id: UUID4
    employer_profile_id: UUID4
    title: str
    description: str
    pay: float
    employment_type: EmploymentType
    location: str
    duration: Optional[str] = None
    status: JobStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    required_skills: List[JobSkillResponse] = []
    employer_profile: Optional[EmployerSummary] = None
