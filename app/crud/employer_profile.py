"""
CRUD operations for EmployerProfile.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import NotFound, ProfileAlreadyExists
from app.models.employer_profile import EmployerProfile
from app.schemas.employer_profile import EmployerProfileRequest


def get_by_user(db: Session, user_id: UUID) -> Optional[EmployerProfile]:
    return db.query(EmployerProfile).filter(EmployerProfile.user_id == user_id).first()


def get(db: Session, user_id: UUID) -> EmployerProfile:
    profile = get_by_user(db, user_id)
    if not profile:
        raise NotFound("Profile")
    return profile


def create(db: Session, user_id: UUID, data: EmployerProfileRequest) -> EmployerProfile:
    """
    Raises:
        ProfileAlreadyExists: If the user already has a profile
    """
    if get_by_user(db, user_id):
        raise ProfileAlreadyExists()

    profile = EmployerProfile(
        user_id=user_id,
        company_name=data.company_name,
        company_description=data.company_description,
        company_website=data.company_website,
        contact_info=data.contact_info,
    )
    db.add(profile)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ProfileAlreadyExists()

    db.refresh(profile)
    return profile


def update(db: Session, user_id: UUID, data: EmployerProfileRequest) -> EmployerProfile:
    profile = get(db, user_id)

    profile.company_name = data.company_name
    profile.company_description = data.company_description
    profile.company_website = data.company_website
    profile.contact_info = data.contact_info

    db.commit()
    db.refresh(profile)
    return profile


def delete(db: Session, user_id: UUID) -> None:
    """Delete the profile along with its jobs and their applications."""
    profile = get(db, user_id)
    db.delete(profile)
    db.commit()
