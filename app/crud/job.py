"""
CRUD operations for Job model.

Covers the employer-side job store (owned create/update/delete and the
applicant list) and the public feed queries. Ownership is resolved through
the caller's employer profile; a job owned by someone else is reported as
not found.
"""

from typing import List
from uuid import UUID
from sqlalchemy.orm import Session, joinedload, selectinload

from app.core.exceptions import EmployerProfileRequired, NotFound
from app.crud import employer_profile as employer_profile_crud
from app.crud import seeker_profile as seeker_profile_crud
from app.crud import skill as skill_crud
from app.models.application import Application
from app.models.employer_profile import EmployerProfile
from app.models.job import Job, JobSkill, JobStatus
from app.schemas.job import JobCreateRequest, JobFilters, JobSort, JobUpdateRequest

JOB_OPTIONS = (
    selectinload(Job.required_skills),
    joinedload(Job.employer_profile),
)


def _build_skills(skill_ids: List[UUID]) -> List[JobSkill]:
    return [JobSkill(skill_id=skill_id) for skill_id in skill_ids]


def get_by_id(db: Session, job_id: UUID) -> Job:
    """
    Public job detail, whatever its status.

    Raises:
        NotFound: If the job does not exist
    """
    job = db.query(Job).options(*JOB_OPTIONS).filter(Job.id == job_id).first()
    if not job:
        raise NotFound("Job")
    return job


def get_owned(db: Session, employer_user_id: UUID, job_id: UUID) -> Job:
    """
    Raises:
        NotFound: If the job does not exist or belongs to another employer
    """
    job = (
        db.query(Job)
        .options(*JOB_OPTIONS)
        .join(EmployerProfile, Job.employer_profile_id == EmployerProfile.id)
        .filter(Job.id == job_id, EmployerProfile.user_id == employer_user_id)
        .first()
    )
    if not job:
        raise NotFound("Job")
    return job


def create(db: Session, employer_user_id: UUID, job_data: JobCreateRequest) -> Job:
    """
    Create an OPEN job with its required skills.

    Raises:
        EmployerProfileRequired: If the caller has no employer profile
        ValidationError: If a required skill is not in the catalog
    """
    profile = employer_profile_crud.get_by_user(db, employer_user_id)
    if not profile:
        raise EmployerProfileRequired()

    skill_crud.resolve(db, job_data.required_skills, "requiredSkills")

    db_job = Job(
        employer_profile_id=profile.id,
        title=job_data.title,
        description=job_data.description,
        pay=job_data.pay,
        employment_type=job_data.employment_type,
        location=job_data.location,
        duration=job_data.duration,
        status=JobStatus.OPEN,
    )
    db_job.required_skills = _build_skills(job_data.required_skills)

    db.add(db_job)
    db.commit()

    return get_by_id(db, db_job.id)


def list_for_employer(db: Session, employer_user_id: UUID) -> List[Job]:
    """All jobs of the caller's employer profile, newest first (empty without a profile)."""
    return (
        db.query(Job)
        .options(*JOB_OPTIONS)
        .join(EmployerProfile, Job.employer_profile_id == EmployerProfile.id)
        .filter(EmployerProfile.user_id == employer_user_id)
        .order_by(Job.created_at.desc(), Job.id.desc())
        .all()
    )


def update(db: Session, employer_user_id: UUID, job_id: UUID, job_data: JobUpdateRequest) -> Job:
    """
    Replace scalar fields and the required skill set.

    Status is left unchanged when not given.
    """
    job = get_owned(db, employer_user_id, job_id)
    skill_crud.resolve(db, job_data.required_skills, "requiredSkills")

    job.title = job_data.title
    job.description = job_data.description
    job.pay = job_data.pay
    job.employment_type = job_data.employment_type
    job.location = job_data.location
    job.duration = job_data.duration
    if job_data.status is not None:
        job.status = job_data.status

    job.required_skills.clear()
    db.flush()
    job.required_skills.extend(_build_skills(job_data.required_skills))

    db.commit()
    return get_by_id(db, job.id)


def delete(db: Session, employer_user_id: UUID, job_id: UUID) -> None:
    """Delete an owned job together with its applications."""
    job = get_owned(db, employer_user_id, job_id)
    db.delete(job)
    db.commit()


def list_applicants(db: Session, employer_user_id: UUID, job_id: UUID) -> List[Application]:
    """
    Applications for an owned job, each with the applicant's full profile.

    Raises:
        NotFound: If the job does not exist or belongs to another employer
    """
    job = get_owned(db, employer_user_id, job_id)

    return (
        db.query(Application)
        .options(
            joinedload(Application.seeker_profile).options(*seeker_profile_crud.PROFILE_OPTIONS)
        )
        .filter(Application.job_id == job.id)
        .order_by(Application.applied_at.desc(), Application.id)
        .all()
    )


def search(db: Session, filters: JobFilters) -> List[Job]:
    """
    Public feed over OPEN jobs.

    Filters combine with AND. `skills` matches jobs requiring at least one
    of the given skills. Pay bounds are inclusive; location is a
    case-insensitive substring match.
    """
    query = db.query(Job).options(*JOB_OPTIONS).filter(Job.status == JobStatus.OPEN)

    if filters.pay_min is not None:
        query = query.filter(Job.pay >= filters.pay_min)
    if filters.pay_max is not None:
        query = query.filter(Job.pay <= filters.pay_max)
    if filters.location:
        query = query.filter(Job.location.icontains(filters.location, autoescape=True))
    if filters.employment_type:
        query = query.filter(Job.employment_type == filters.employment_type)
    if filters.skills:
        query = query.filter(Job.required_skills.any(JobSkill.skill_id.in_(filters.skills)))

    if filters.sort == JobSort.PAY_ASC:
        query = query.order_by(Job.pay.asc(), Job.created_at.desc(), Job.id)
    elif filters.sort == JobSort.PAY_DESC:
        query = query.order_by(Job.pay.desc(), Job.created_at.desc(), Job.id)
    else:
        query = query.order_by(Job.created_at.desc(), Job.id.desc())

    return query.all()
