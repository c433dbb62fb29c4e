import enum
import uuid
from sqlalchemy import Column, String, Text, Numeric, DateTime, Enum, ForeignKey, UniqueConstraint, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from app.core.database import Base


class JobStatus(str, enum.Enum):
    """
    Posting status.

    - OPEN: Visible in the public feed and accepting applications
    - CLOSED: Hidden from the feed, still viewable by id
    """
    OPEN = "OPEN"
    CLOSED = "CLOSED"


class EmploymentType(str, enum.Enum):
    """How the job is paid: a daily wage or a fixed amount for the whole project."""
    PER_DAY = "PER_DAY"
    PER_PROJECT = "PER_PROJECT"


class Job(Base):
    """
    Job model representing a job posting owned by an employer profile.
    """
    __tablename__ = "jobs"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    employer_profile_id = Column(
        UUID(as_uuid=True),
        ForeignKey("employer_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    title = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=False)
    pay = Column(Numeric(12, 2), nullable=False, index=True)
    employment_type = Column(Enum(EmploymentType, name="employmenttype"), nullable=False, index=True)
    location = Column(String, nullable=False, index=True)
    duration = Column(String, nullable=True)

    status = Column(Enum(JobStatus, name="jobstatus"), default=JobStatus.OPEN, nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    employer_profile = relationship("EmployerProfile", back_populates="jobs")
    required_skills = relationship("JobSkill", back_populates="job", cascade="all, delete-orphan")
    applications = relationship("Application", back_populates="job", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', status={self.status.value})>"


class JobSkill(Base):
    """Required skill of a job."""
    __tablename__ = "job_skills"
    __table_args__ = (
        UniqueConstraint("job_id", "skill_id", name="uq_job_skill"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    job_id = Column(UUID(as_uuid=True), ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    skill_id = Column(UUID(as_uuid=True), ForeignKey("skills.id", ondelete="CASCADE"), nullable=False, index=True)

    job = relationship("Job", back_populates="required_skills")
    skill = relationship("Skill", lazy="joined")
