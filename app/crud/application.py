"""
CRUD operations for Application model.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from app.core.exceptions import AlreadyApplied, JobClosed, NotFound, SeekerProfileRequired
from app.crud import job as job_crud
from app.crud import seeker_profile as seeker_profile_crud
from app.models.application import Application
from app.models.job import Job, JobStatus
from app.models.seeker_profile import SeekerProfile


def get_for_job(db: Session, job_id: UUID, seeker_profile_id: UUID) -> Optional[Application]:
    return db.query(Application).filter(
        Application.job_id == job_id,
        Application.seeker_profile_id == seeker_profile_id
    ).first()


def apply(db: Session, seeker_user_id: UUID, job_id: UUID) -> Application:
    """
    Apply the caller's seeker profile to a job.

    Checks run in order: profile, job existence, job open, duplicate. The
    unique (job_id, seeker_profile_id) constraint settles concurrent
    duplicate applications at commit.

    Raises:
        SeekerProfileRequired: Caller has no seeker profile
        NotFound: Job does not exist
        JobClosed: Job status is not OPEN
        AlreadyApplied: Caller already applied to this job
    """
    profile = seeker_profile_crud.get_by_user(db, seeker_user_id)
    if not profile:
        raise SeekerProfileRequired()

    job = db.query(Job).filter(Job.id == job_id).first()
    if not job:
        raise NotFound("Job")
    if job.status != JobStatus.OPEN:
        raise JobClosed()

    if get_for_job(db, job.id, profile.id):
        raise AlreadyApplied()

    application = Application(job_id=job.id, seeker_profile_id=profile.id)
    db.add(application)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise AlreadyApplied()

    db.refresh(application)
    return application


def list_for_seeker(db: Session, seeker_user_id: UUID) -> List[Application]:
    """
    The caller's applications, newest first, each with job and employer detail.

    Raises:
        NotFound: If the caller has no seeker profile
    """
    profile = seeker_profile_crud.get_by_user(db, seeker_user_id)
    if not profile:
        raise NotFound("Profile")

    return (
        db.query(Application)
        .options(joinedload(Application.job).options(*job_crud.JOB_OPTIONS))
        .filter(Application.seeker_profile_id == profile.id)
        .order_by(Application.applied_at.desc(), Application.id)
        .all()
    )


def withdraw(db: Session, seeker_user_id: UUID, application_id: UUID) -> None:
    """
    Delete one of the caller's applications.

    Raises:
        NotFound: If the application does not exist or is not the caller's
    """
    application = (
        db.query(Application)
        .join(SeekerProfile, Application.seeker_profile_id == SeekerProfile.id)
        .filter(Application.id == application_id, SeekerProfile.user_id == seeker_user_id)
        .first()
    )
    if not application:
        raise NotFound("Application")

    db.delete(application)
    db.commit()
