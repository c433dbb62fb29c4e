"""
FastAPI dependencies for authentication and authorization.

These dependencies are used to protect endpoints and extract user context.
"""

from typing import Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import Forbidden, InvalidToken
from app.core.security import decode_token
from app.crud import user as user_crud
from app.models.user import User, UserRole

# HTTP Bearer token scheme (Authorization: Bearer <token>)
# auto_error is off so a missing header is reported as InvalidToken (401)
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """
    Extract and validate the current user from JWT token.

    This dependency:
    1. Extracts the Bearer token from Authorization header
    2. Decodes and validates the JWT (signature and expiry)
    3. Fetches the user from the database

    Raises:
        InvalidToken: If the token is missing, malformed, expired, or the user is gone
    """
    if credentials is None:
        raise InvalidToken("Authentication required")

    payload = decode_token(credentials.credentials)
    user_id = payload.get("sub")
    if user_id is None:
        raise InvalidToken()

    try:
        user_uuid = UUID(user_id)
    except (TypeError, ValueError):
        raise InvalidToken()

    user = user_crud.get_by_id(db, user_uuid)
    if user is None:
        raise InvalidToken()

    return user


def require_role(role: UserRole):
    """
    Build a dependency that admits only users with the given role.

    Usage:
        @router.get("/profile")
        def get_profile(user: User = Depends(require_role(UserRole.JOB_SEEKER))):
            ...

    Raises:
        Forbidden: If the authenticated user has a different role
    """
    async def role_checker(user: User = Depends(get_current_user)) -> User:
        if user.role != role:
            raise Forbidden()
        return user

    return role_checker


get_current_seeker = require_role(UserRole.JOB_SEEKER)
get_current_employer = require_role(UserRole.JOB_PROVIDER)
