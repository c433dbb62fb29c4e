"""
Authentication endpoints for signup and login.

Implements JWT-based stateless authentication:
- POST /signup: Create new user account and receive a token
- POST /login: Authenticate and receive a token
- GET /me: Get the authenticated user
"""

import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_user
from app.core.exceptions import InvalidCredentials
from app.core.security import create_access_token
from app.crud import user as user_crud
from app.models.user import User
from app.schemas.common import APIResponse
from app.schemas.user import SignupRequest, LoginRequest, AuthResponse, UserResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


def _issue_token(user: User) -> str:
    return create_access_token(data={
        "sub": str(user.id),
        "email": user.email,
        "role": user.role.value,
    })


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=APIResponse[AuthResponse])
def signup(
    request: SignupRequest,
    db: Session = Depends(get_db)
):
    """
    Register a new user account.

    Returns a JWT token for immediate login. The role chosen here is
    permanent.
    """
    new_user = user_crud.create(db, request.email, request.password, request.role)

    logger.info(f"New user registered: {new_user.id} (role: {new_user.role.value})")

    return APIResponse(
        message="User registered successfully",
        data=AuthResponse(token=_issue_token(new_user), user=UserResponse.model_validate(new_user)),
    )


@router.post("/login", response_model=APIResponse[AuthResponse])
def login(
    request: LoginRequest,
    db: Session = Depends(get_db)
):
    """
    Authenticate user and return a JWT token.

    Unknown email and wrong password produce the same 401.
    """
    try:
        user = user_crud.authenticate(db, request.email, request.password)
    except InvalidCredentials:
        logger.warning(f"Failed login attempt for {request.email}")
        raise

    logger.info(f"User logged in: {user.id}")

    return APIResponse(
        message="Login successful",
        data=AuthResponse(token=_issue_token(user), user=UserResponse.model_validate(user)),
    )


@router.get("/me", response_model=APIResponse[UserResponse])
def get_me(current_user: User = Depends(get_current_user)):
    """
    Get current authenticated user.

    Requires valid JWT token in Authorization header.
    """
    return APIResponse(data=UserResponse.model_validate(current_user))
