import uuid
from sqlalchemy import Column, String, Text, ForeignKey, DateTime, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from app.core.database import Base


class EmployerProfile(Base):
    """
    Company profile of a job provider.

    One per employer user. Owns every job the employer posts; deleting the
    profile deletes those jobs and their applications.
    """
    __tablename__ = "employer_profiles"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True, index=True)

    company_name = Column(String, nullable=False)
    company_description = Column(Text, nullable=True)
    company_website = Column(String, nullable=True)
    contact_info = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="employer_profile")
    jobs = relationship("Job", back_populates="employer_profile", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<EmployerProfile(id={self.id}, company_name='{self.company_name}')>"
