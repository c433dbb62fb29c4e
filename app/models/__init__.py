"""
Database models package.
"""

from app.models.user import User, UserRole
from app.models.skill import Skill
from app.models.seeker_profile import SeekerProfile, ProfileSkill, EmploymentEntry, Reference
from app.models.employer_profile import EmployerProfile
from app.models.job import Job, JobSkill, JobStatus, EmploymentType
from app.models.application import Application

__all__ = [
    "User", "UserRole", "Skill",
    "SeekerProfile", "ProfileSkill", "EmploymentEntry", "Reference",
    "EmployerProfile", "Job", "JobSkill", "JobStatus", "EmploymentType",
    "Application",
]
