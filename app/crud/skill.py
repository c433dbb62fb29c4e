"""
CRUD operations for the skill catalog.
"""

import logging
from typing import Dict, Iterable, List
from uuid import UUID
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ValidationError
from app.models.skill import Skill

logger = logging.getLogger(__name__)

# (skill_name, requires_certificate)
SKILL_CATALOG = [
    ("AC Repair", True),
    ("Carpentry", False),
    ("Cleaning", False),
    ("Construction Labor", False),
    ("Cooking", False),
    ("Delivery", False),
    ("Driving", True),
    ("Electrical Work", True),
    ("Gardening", False),
    ("Housekeeping", False),
    ("Loading and Unloading", False),
    ("Masonry", False),
    ("Painting", False),
    ("Plumbing", True),
    ("Security Guard", True),
    ("Tile Fitting", False),
    ("Welding", True),
]


def list_all(db: Session) -> List[Skill]:
    """All catalog skills ordered by name."""
    return db.query(Skill).order_by(Skill.skill_name.asc()).all()


def get_many(db: Session, skill_ids: Iterable[UUID]) -> Dict[UUID, Skill]:
    ids = list(skill_ids)
    if not ids:
        return {}
    return {skill.id: skill for skill in db.query(Skill).filter(Skill.id.in_(ids)).all()}


def resolve(db: Session, skill_ids: List[UUID], field: str) -> Dict[UUID, Skill]:
    """
    Load the given catalog skills.

    Raises:
        ValidationError: If any id is not in the catalog
    """
    found = get_many(db, skill_ids)
    errors = [
        {"field": f"{field}[{index}]", "message": f"Skill {skill_id} does not exist"}
        for index, skill_id in enumerate(skill_ids)
        if skill_id not in found
    ]
    if errors:
        raise ValidationError(errors=errors)
    return found


def seed_catalog(db: Session, catalog=SKILL_CATALOG) -> int:
    """
    Insert every catalog skill that is not present yet.

    Safe to run on every startup and from several workers at once: a name
    inserted concurrently by another process is skipped.

    Returns:
        Number of skills inserted
    """
    existing = {name for (name,) in db.query(Skill.skill_name).all()}
    added = 0

    for name, requires_certificate in catalog:
        if name in existing:
            continue
        db.add(Skill(skill_name=name, requires_certificate=requires_certificate))
        try:
            db.commit()
            added += 1
        except IntegrityError:
            db.rollback()
            logger.info(f"Skill '{name}' was seeded by another process")

    return added
