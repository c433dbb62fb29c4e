import logging
from uuid import UUID
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_seeker
from app.crud import application as application_crud
from app.models.user import User
from app.schemas.application import ApplicationCreateRequest, ApplicationResponse
from app.schemas.common import APIResponse

router = APIRouter(prefix="/applications", tags=["Applications"])
logger = logging.getLogger(__name__)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=APIResponse[ApplicationResponse])
def apply_to_job(
    request: ApplicationCreateRequest,
    user: User = Depends(get_current_seeker),
    db: Session = Depends(get_db)
):
    """
    Apply to an open job.

    Requires a seeker profile. A job can be applied to once; withdraw
    first to apply again.
    """
    application = application_crud.apply(db, user.id, request.job_id)
    logger.info(f"Application {application.id} created for job {request.job_id}")
    return APIResponse(
        message="Application submitted successfully",
        data=ApplicationResponse.model_validate(application),
    )


@router.delete("/{application_id}", response_model=APIResponse)
def withdraw_application(
    application_id: UUID,
    user: User = Depends(get_current_seeker),
    db: Session = Depends(get_db)
):
    """Withdraw (delete) one of the caller's applications."""
    application_crud.withdraw(db, user.id, application_id)
    logger.info(f"Application {application_id} withdrawn")
    return APIResponse(message="Application withdrawn successfully")
