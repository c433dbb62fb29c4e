"""
Domain errors raised by the CRUD layer and dependencies.

Each error carries the HTTP status it maps to. The handlers registered in
main.py render them in the standard response envelope:

    {"success": false, "message": "...", "errors": [...]}
"""

from typing import Any, Optional


class MarketplaceError(Exception):
    """Base class for every business-rule failure."""
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, errors: Optional[Any] = None):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)


class ValidationError(MarketplaceError):
    """Malformed or missing input. `errors` holds field-level detail."""
    status_code = 400
    default_message = "Validation failed"

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls(errors=[{"field": field, "message": message}])


class DuplicateEmail(MarketplaceError):
    status_code = 400
    default_message = "User with this email already exists"


class ProfileAlreadyExists(MarketplaceError):
    status_code = 400
    default_message = "Profile already exists"


class AlreadyApplied(MarketplaceError):
    status_code = 400
    default_message = "You have already applied to this job"


class JobClosed(MarketplaceError):
    status_code = 400
    default_message = "This job is no longer accepting applications"


class SeekerProfileRequired(MarketplaceError):
    status_code = 400
    default_message = "Create your job seeker profile first"


class EmployerProfileRequired(MarketplaceError):
    status_code = 400
    default_message = "Create your employer profile first"


class InvalidCredentials(MarketplaceError):
    status_code = 401
    default_message = "Invalid email or password"


class InvalidToken(MarketplaceError):
    status_code = 401
    default_message = "Invalid or expired token"


class Forbidden(MarketplaceError):
    status_code = 403
    default_message = "You do not have permission to perform this action"


class NotFound(MarketplaceError):
    """Entity absent, or owned by another user (never distinguished)."""
    status_code = 404
    default_message = "Not found"

    def __init__(self, entity: str = "Resource"):
        super().__init__(f"{entity} not found")
