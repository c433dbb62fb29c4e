"""
CRUD operations for User model (the credential store).
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import DuplicateEmail, InvalidCredentials
from app.core.security import get_password_hash, verify_password
from app.models.user import User, UserRole


def get_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def get_by_id(db: Session, user_id: UUID) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def create(db: Session, email: str, password: str, role: UserRole) -> User:
    """
    Create a user with a bcrypt-hashed password.

    The pre-check gives a clean error for the common case; the unique index
    on email decides concurrent signups at commit time.

    Raises:
        DuplicateEmail: If the email is already registered
    """
    if get_by_email(db, email):
        raise DuplicateEmail()

    user = User(
        email=email,
        hashed_password=get_password_hash(password),
        role=role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateEmail()

    db.refresh(user)
    return user


def authenticate(db: Session, email: str, password: str) -> User:
    """
    Check credentials.

    Raises:
        InvalidCredentials: Unknown email or wrong password (not distinguished)
    """
    user = get_by_email(db, email)
    if not user or not verify_password(password, user.hashed_password):
        raise InvalidCredentials()
    return user
