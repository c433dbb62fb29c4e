"""
Job seeker profile and its owned collections.

A SeekerProfile belongs to exactly one User and owns three child
collections (skills, employment history, references). Child rows keep the
order they were submitted in via their `position` column, and updates
replace each collection wholesale.
"""

import uuid
from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime, UniqueConstraint, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from app.core.database import Base


class SeekerProfile(Base):
    __tablename__ = "seeker_profiles"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True, index=True)

    name = Column(String, nullable=False)
    address = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    education = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="seeker_profile")
    skills = relationship(
        "ProfileSkill",
        back_populates="profile",
        cascade="all, delete-orphan",
        order_by="ProfileSkill.position"
    )
    employment_history = relationship(
        "EmploymentEntry",
        back_populates="profile",
        cascade="all, delete-orphan",
        order_by="EmploymentEntry.position"
    )
    references = relationship(
        "Reference",
        back_populates="profile",
        cascade="all, delete-orphan",
        order_by="Reference.position"
    )
    applications = relationship("Application", back_populates="seeker_profile", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<SeekerProfile(id={self.id}, user_id={self.user_id}, name='{self.name}')>"


class ProfileSkill(Base):
    """A catalog skill claimed by a seeker, with an optional certificate."""
    __tablename__ = "profile_skills"
    __table_args__ = (
        UniqueConstraint("seeker_profile_id", "skill_id", name="uq_profile_skill"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    seeker_profile_id = Column(UUID(as_uuid=True), ForeignKey("seeker_profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    skill_id = Column(UUID(as_uuid=True), ForeignKey("skills.id", ondelete="CASCADE"), nullable=False, index=True)
    certificate_url = Column(String, nullable=True)
    position = Column(Integer, nullable=False, default=0)

    profile = relationship("SeekerProfile", back_populates="skills")
    skill = relationship("Skill", lazy="joined")


class EmploymentEntry(Base):
    __tablename__ = "employment_entries"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    seeker_profile_id = Column(UUID(as_uuid=True), ForeignKey("seeker_profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    company_name = Column(String, nullable=False)
    duration = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    position = Column(Integer, nullable=False, default=0)

    profile = relationship("SeekerProfile", back_populates="employment_history")


class Reference(Base):
    __tablename__ = "seeker_references"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    seeker_profile_id = Column(UUID(as_uuid=True), ForeignKey("seeker_profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    contact = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    position = Column(Integer, nullable=False, default=0)

    profile = relationship("SeekerProfile", back_populates="references")
