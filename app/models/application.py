"""
Application database model.

Links a seeker profile to a job. A seeker applies to a given job at most
once; the (job_id, seeker_profile_id) unique constraint makes concurrent
duplicate attempts fail at commit. Applications are never updated, only
created and withdrawn (deleted).
"""

import uuid
from sqlalchemy import Column, ForeignKey, DateTime, UniqueConstraint, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from app.core.database import Base


class Application(Base):
    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("job_id", "seeker_profile_id", name="uq_application_job_seeker"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    job_id = Column(UUID(as_uuid=True), ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    seeker_profile_id = Column(
        UUID(as_uuid=True),
        ForeignKey("seeker_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    applied_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    job = relationship("Job", back_populates="applications")
    seeker_profile = relationship("SeekerProfile", back_populates="applications")

    def __repr__(self):
        return f"<Application(id={self.id}, job_id={self.job_id}, seeker_profile_id={self.seeker_profile_id})>"
