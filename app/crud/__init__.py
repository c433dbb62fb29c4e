"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer provides a clean separation between API routes and database operations,
following the Repository pattern. Business-rule failures are raised as the
errors in app.core.exceptions.
"""

from app.crud import user, skill, seeker_profile, employer_profile, job, application

__all__ = ["user", "skill", "seeker_profile", "employer_profile", "job", "application"]
