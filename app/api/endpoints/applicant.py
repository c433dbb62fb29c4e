"""
Job seeker endpoints.

- POST/GET/PUT/DELETE /applicant/profile: Manage the caller's seeker profile
- GET /applicant/applications: The caller's applications with job detail
- GET /applicant/{profile_id}: Employers view a seeker profile

Profile routes require role=job_seeker; the profile-by-id view requires
role=job_provider.
"""

import logging
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_seeker, get_current_employer
from app.crud import application as application_crud
from app.crud import seeker_profile as seeker_profile_crud
from app.models.user import User
from app.schemas.application import SeekerApplicationResponse
from app.schemas.common import APIResponse
from app.schemas.seeker_profile import SeekerProfileRequest, SeekerProfileResponse

router = APIRouter(prefix="/applicant", tags=["Job Seeker"])
logger = logging.getLogger(__name__)


@router.post("/profile", status_code=status.HTTP_201_CREATED, response_model=APIResponse[SeekerProfileResponse])
def create_profile(
    request: SeekerProfileRequest,
    user: User = Depends(get_current_seeker),
    db: Session = Depends(get_db)
):
    """
    Create the caller's profile with skills, employment history and references.

    Skills flagged requiresCertificate need a certificateUrl.
    """
    profile = seeker_profile_crud.create(db, user.id, request)
    logger.info(f"Created seeker profile {profile.id} for user {user.id}")
    return APIResponse(
        message="Profile created successfully",
        data=SeekerProfileResponse.model_validate(profile),
    )


@router.get("/profile", response_model=APIResponse[SeekerProfileResponse])
def get_profile(
    user: User = Depends(get_current_seeker),
    db: Session = Depends(get_db)
):
    profile = seeker_profile_crud.get(db, user.id)
    return APIResponse(data=SeekerProfileResponse.model_validate(profile))


@router.put("/profile", response_model=APIResponse[SeekerProfileResponse])
def update_profile(
    request: SeekerProfileRequest,
    user: User = Depends(get_current_seeker),
    db: Session = Depends(get_db)
):
    """
    Replace the caller's profile.

    Skills, employment history and references are replaced by the
    submitted lists; anything left out is deleted.
    """
    profile = seeker_profile_crud.update(db, user.id, request)
    logger.info(f"Updated seeker profile {profile.id}")
    return APIResponse(
        message="Profile updated successfully",
        data=SeekerProfileResponse.model_validate(profile),
    )


@router.delete("/profile", response_model=APIResponse)
def delete_profile(
    user: User = Depends(get_current_seeker),
    db: Session = Depends(get_db)
):
    """
    Delete the caller's profile. Its applications are deleted with it.
    """
    seeker_profile_crud.delete(db, user.id)
    logger.info(f"Deleted seeker profile of user {user.id}")
    return APIResponse(message="Profile deleted successfully")


@router.get("/applications", response_model=APIResponse[List[SeekerApplicationResponse]])
def list_my_applications(
    user: User = Depends(get_current_seeker),
    db: Session = Depends(get_db)
):
    """
    The caller's applications, newest first. 404 when no profile exists yet.
    """
    applications = application_crud.list_for_seeker(db, user.id)
    return APIResponse(data=[SeekerApplicationResponse.model_validate(a) for a in applications])


@router.get("/{profile_id}", response_model=APIResponse[SeekerProfileResponse])
def view_seeker_profile(
    profile_id: UUID,
    employer: User = Depends(get_current_employer),
    db: Session = Depends(get_db)
):
    """
    View a seeker's profile (employers only).
    """
    profile = seeker_profile_crud.get_by_id(db, profile_id)
    return APIResponse(data=SeekerProfileResponse.model_validate(profile))
