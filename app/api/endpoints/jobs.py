"""
Public job feed.

Browsing needs no authentication. Only OPEN jobs appear in the feed, but a
job's detail page stays reachable by id after it closes.
"""

import logging
from decimal import Decimal
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import ValidationError
from app.crud import job as job_crud
from app.models.job import EmploymentType
from app.schemas.common import APIResponse
from app.schemas.job import JobFilters, JobResponse, JobSort

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


def parse_skill_ids(raw: Optional[str]) -> List[UUID]:
    """Parse the comma-separated `skills` query parameter."""
    if not raw:
        return []

    skill_ids = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            skill_ids.append(UUID(part))
        except ValueError:
            raise ValidationError.for_field("skills", f"'{part}' is not a valid skill id")
    return skill_ids


@router.get("", response_model=APIResponse[List[JobResponse]])
def search_jobs(
    pay_min: Optional[Decimal] = Query(None, ge=0),
    pay_max: Optional[Decimal] = Query(None, ge=0),
    location: Optional[str] = Query(None, max_length=200),
    employment_type: Optional[EmploymentType] = Query(None, alias="employmentType"),
    skills: Optional[str] = Query(None, description="Comma-separated skill ids; matches jobs requiring any of them"),
    sort: JobSort = Query(JobSort.RECENT),
    db: Session = Depends(get_db)
):
    """
    Search open jobs.

    Args:
        pay_min / pay_max: Inclusive pay bounds
        location: Case-insensitive substring of the job location
        employmentType: PER_DAY or PER_PROJECT
        skills: Comma-separated skill ids (any-of match)
        sort: recent (default), pay_asc or pay_desc
    """
    filters = JobFilters(
        pay_min=pay_min,
        pay_max=pay_max,
        location=location.strip() if location else None,
        employment_type=employment_type,
        skills=parse_skill_ids(skills),
        sort=sort,
    )

    jobs = job_crud.search(db, filters)
    return APIResponse(data=[JobResponse.model_validate(j) for j in jobs])


@router.get("/{job_id}", response_model=APIResponse[JobResponse])
def get_job(job_id: UUID, db: Session = Depends(get_db)):
    """
    Retrieve a job by ID, including the employer's public company details.
    """
    job = job_crud.get_by_id(db, job_id)
    return APIResponse(data=JobResponse.model_validate(job))
