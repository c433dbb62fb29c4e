from datetime import datetime
from typing import Optional
from pydantic import UUID4

from app.schemas.common import CamelModel, RequestModel
from app.schemas.job import JobResponse
from app.schemas.seeker_profile import SeekerProfileResponse


class ApplicationCreateRequest(RequestModel):
    job_id: UUID4


class ApplicationResponse(CamelModel):
    id: UUID4
    job_id: UUID4
    seeker_profile_id: UUID4
    applied_at: Optional[datetime] = None


class SeekerApplicationResponse(ApplicationResponse):
    """An application as the seeker sees it, with the job attached"""
    job: JobResponse


class ApplicantResponse(ApplicationResponse):
    """An application as the employer sees it, with the applicant's profile"""
    seeker_profile: SeekerProfileResponse
