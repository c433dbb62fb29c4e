"""
Global skill catalog.

Seeded once at startup and shared by seeker profiles and job postings.
Users never write to this table.
"""

import uuid
from sqlalchemy import Column, String, Boolean, DateTime, func
from sqlalchemy.dialects.postgresql import UUID
from app.core.database import Base


class Skill(Base):
    __tablename__ = "skills"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    skill_name = Column(String, unique=True, nullable=False, index=True)

    # Seekers listing this skill must attach a certificate URL
    requires_certificate = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Skill(id={self.id}, skill_name='{self.skill_name}')>"
