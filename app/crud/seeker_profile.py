"""
CRUD operations for SeekerProfile and its nested collections.

Nested collections (skills, employment history, references) are written
together with the profile row in one transaction. Updates replace every
collection wholesale: old rows are deleted and the submitted rows
inserted before the single commit, so readers never see a half-replaced
profile.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from app.core.exceptions import NotFound, ProfileAlreadyExists, ValidationError
from app.crud import skill as skill_crud
from app.models.seeker_profile import SeekerProfile, ProfileSkill, EmploymentEntry, Reference
from app.schemas.seeker_profile import SeekerProfileRequest

PROFILE_OPTIONS = (
    selectinload(SeekerProfile.skills),
    selectinload(SeekerProfile.employment_history),
    selectinload(SeekerProfile.references),
)


def get_by_user(db: Session, user_id: UUID) -> Optional[SeekerProfile]:
    return (
        db.query(SeekerProfile)
        .options(*PROFILE_OPTIONS)
        .filter(SeekerProfile.user_id == user_id)
        .first()
    )


def get(db: Session, user_id: UUID) -> SeekerProfile:
    """
    Raises:
        NotFound: If the user has no seeker profile
    """
    profile = get_by_user(db, user_id)
    if not profile:
        raise NotFound("Profile")
    return profile


def get_by_id(db: Session, profile_id: UUID) -> SeekerProfile:
    profile = (
        db.query(SeekerProfile)
        .options(*PROFILE_OPTIONS)
        .filter(SeekerProfile.id == profile_id)
        .first()
    )
    if not profile:
        raise NotFound("Profile")
    return profile


def _check_skills(db: Session, data: SeekerProfileRequest) -> None:
    """
    Every skill must exist, and skills flagged requires_certificate must
    carry a certificate URL.

    Raises:
        ValidationError: With one entry per offending skill
    """
    catalog = skill_crud.resolve(db, [s.skill_id for s in data.skills], "skills")

    errors = []
    for index, entry in enumerate(data.skills):
        skill = catalog[entry.skill_id]
        if skill.requires_certificate and not entry.certificate_url:
            errors.append({
                "field": f"skills[{index}].certificateUrl",
                "message": f"Certificate is required for {skill.skill_name}",
            })
    if errors:
        raise ValidationError(errors=errors)


def _build_skills(data: SeekerProfileRequest) -> List[ProfileSkill]:
    return [
        ProfileSkill(skill_id=s.skill_id, certificate_url=s.certificate_url, position=i)
        for i, s in enumerate(data.skills)
    ]


def _build_employment(data: SeekerProfileRequest) -> List[EmploymentEntry]:
    return [
        EmploymentEntry(company_name=e.company_name, duration=e.duration, description=e.description, position=i)
        for i, e in enumerate(data.employment_history)
    ]


def _build_references(data: SeekerProfileRequest) -> List[Reference]:
    return [
        Reference(name=r.name, contact=r.contact, description=r.description, position=i)
        for i, r in enumerate(data.references)
    ]


def create(db: Session, user_id: UUID, data: SeekerProfileRequest) -> SeekerProfile:
    """
    Create the profile with all nested rows (all-or-nothing).

    Raises:
        ProfileAlreadyExists: If the user already has a profile
        ValidationError: Unknown skill or missing certificate
    """
    if get_by_user(db, user_id):
        raise ProfileAlreadyExists()

    _check_skills(db, data)

    profile = SeekerProfile(
        user_id=user_id,
        name=data.name,
        address=data.address,
        phone=data.phone,
        education=data.education,
    )
    profile.skills = _build_skills(data)
    profile.employment_history = _build_employment(data)
    profile.references = _build_references(data)

    db.add(profile)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ProfileAlreadyExists()

    return get(db, user_id)


def update(db: Session, user_id: UUID, data: SeekerProfileRequest) -> SeekerProfile:
    """
    Overwrite scalar fields and replace every nested collection.

    Raises:
        NotFound: If the user has no profile
        ValidationError: Unknown skill or missing certificate
    """
    profile = get(db, user_id)
    _check_skills(db, data)

    profile.name = data.name
    profile.address = data.address
    profile.phone = data.phone
    profile.education = data.education

    # Deletes must reach the database before the inserts, otherwise
    # re-submitting an existing skill trips uq_profile_skill
    profile.skills.clear()
    profile.employment_history.clear()
    profile.references.clear()
    db.flush()

    profile.skills.extend(_build_skills(data))
    profile.employment_history.extend(_build_employment(data))
    profile.references.extend(_build_references(data))

    db.commit()
    return get(db, user_id)


def delete(db: Session, user_id: UUID) -> None:
    """
    Delete the profile, its nested rows and its applications.

    Raises:
        NotFound: If the user has no profile
    """
    profile = get(db, user_id)
    db.delete(profile)
    db.commit()
