"""
Employer endpoints.

- POST/GET/PUT/DELETE /employer/profile: Manage the caller's company profile
- POST/GET /employer/jobs: Post a job, list own jobs
- GET/PUT/DELETE /employer/jobs/{job_id}: Manage one own job
- GET /employer/jobs/{job_id}/applicants: Applications with full seeker profiles

All routes require role=job_provider. Jobs owned by other employers are
reported as 404.
"""

import logging
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_employer
from app.crud import employer_profile as employer_profile_crud
from app.crud import job as job_crud
from app.models.user import User
from app.schemas.application import ApplicantResponse
from app.schemas.common import APIResponse
from app.schemas.employer_profile import EmployerProfileRequest, EmployerProfileResponse
from app.schemas.job import JobCreateRequest, JobResponse, JobUpdateRequest

router = APIRouter(prefix="/employer", tags=["Employer"])
logger = logging.getLogger(__name__)


@router.post("/profile", status_code=status.HTTP_201_CREATED, response_model=APIResponse[EmployerProfileResponse])
def create_profile(
    request: EmployerProfileRequest,
    user: User = Depends(get_current_employer),
    db: Session = Depends(get_db)
):
    profile = employer_profile_crud.create(db, user.id, request)
    logger.info(f"Created employer profile {profile.id} for user {user.id}")
    return APIResponse(
        message="Profile created successfully",
        data=EmployerProfileResponse.model_validate(profile),
    )


@router.get("/profile", response_model=APIResponse[EmployerProfileResponse])
def get_profile(
    user: User = Depends(get_current_employer),
    db: Session = Depends(get_db)
):
    profile = employer_profile_crud.get(db, user.id)
    return APIResponse(data=EmployerProfileResponse.model_validate(profile))


@router.put("/profile", response_model=APIResponse[EmployerProfileResponse])
def update_profile(
    request: EmployerProfileRequest,
    user: User = Depends(get_current_employer),
    db: Session = Depends(get_db)
):
    profile = employer_profile_crud.update(db, user.id, request)
    logger.info(f"Updated employer profile {profile.id}")
    return APIResponse(
        message="Profile updated successfully",
        data=EmployerProfileResponse.model_validate(profile),
    )


@router.delete("/profile", response_model=APIResponse)
def delete_profile(
    user: User = Depends(get_current_employer),
    db: Session = Depends(get_db)
):
    """
    Delete the company profile.

    IMPORTANT: every job posted under it, and every application to those
    jobs, is deleted too.
    """
    employer_profile_crud.delete(db, user.id)
    logger.info(f"Deleted employer profile of user {user.id}")
    return APIResponse(message="Profile deleted successfully")


@router.post("/jobs", status_code=status.HTTP_201_CREATED, response_model=APIResponse[JobResponse])
def create_job(
    request: JobCreateRequest,
    user: User = Depends(get_current_employer),
    db: Session = Depends(get_db)
):
    """
    Post a new job. It starts OPEN and appears in the public feed.
    """
    job = job_crud.create(db, user.id, request)
    logger.info(f"Created job {job.id}: {job.title}")
    return APIResponse(message="Job created successfully", data=JobResponse.model_validate(job))


@router.get("/jobs", response_model=APIResponse[List[JobResponse]])
def list_my_jobs(
    user: User = Depends(get_current_employer),
    db: Session = Depends(get_db)
):
    jobs = job_crud.list_for_employer(db, user.id)
    return APIResponse(data=[JobResponse.model_validate(j) for j in jobs])


@router.get("/jobs/{job_id}", response_model=APIResponse[JobResponse])
def get_my_job(
    job_id: UUID,
    user: User = Depends(get_current_employer),
    db: Session = Depends(get_db)
):
    job = job_crud.get_owned(db, user.id, job_id)
    return APIResponse(data=JobResponse.model_validate(job))


@router.put("/jobs/{job_id}", response_model=APIResponse[JobResponse])
def update_job(
    job_id: UUID,
    request: JobUpdateRequest,
    user: User = Depends(get_current_employer),
    db: Session = Depends(get_db)
):
    """
    Replace a job. requiredSkills replaces the previous set; status=CLOSED
    stops new applications and removes the job from the feed.
    """
    job = job_crud.update(db, user.id, job_id, request)
    logger.info(f"Updated job {job.id} (status: {job.status.value})")
    return APIResponse(message="Job updated successfully", data=JobResponse.model_validate(job))


@router.delete("/jobs/{job_id}", response_model=APIResponse)
def delete_job(
    job_id: UUID,
    user: User = Depends(get_current_employer),
    db: Session = Depends(get_db)
):
    """Delete a job and all applications to it."""
    job_crud.delete(db, user.id, job_id)
    logger.info(f"Deleted job {job_id}")
    return APIResponse(message="Job deleted successfully")


@router.get("/jobs/{job_id}/applicants", response_model=APIResponse[List[ApplicantResponse]])
def list_applicants(
    job_id: UUID,
    user: User = Depends(get_current_employer),
    db: Session = Depends(get_db)
):
    applications = job_crud.list_applicants(db, user.id, job_id)
    return APIResponse(data=[ApplicantResponse.model_validate(a) for a in applications])
