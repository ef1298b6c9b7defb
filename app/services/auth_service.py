# File: app/services/auth_service.py

"""
Authentication service.

  - signup: create a user with a bcrypt-hashed password, return a token
  - login: verify credentials, return a token
  - authenticate_user: the lookup + password check behind login
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, UnauthorizedError
from app.core.security import create_access_token, hash_password, verify_password
from app.models.user import User

logger = logging.getLogger("bookmarks.auth")

# Checked against when the email is unknown, so a miss costs the same
# bcrypt work as a wrong password.
_DUMMY_HASH = hash_password("bookmarks-timing-dummy")


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.scalar(select(User).where(User.email == email))


def authenticate_user(
    db: Session,
    *,
    email: str,
    password: str,
) -> Optional[User]:
    """
    Return the user if the password matches, otherwise None.
    """
    user = get_user_by_email(db, email)
    if user is None:
        verify_password(password, _DUMMY_HASH)
        return None
    if not verify_password(password, user.hash):
        return None
    return user


def signup(db: Session, *, email: str, password: str) -> str:
    if get_user_by_email(db, email) is not None:
        raise ConflictError("Credentials taken")

    user = User(email=email, hash=hash_password(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        # Lost a race against a concurrent signup for the same email
        db.rollback()
        raise ConflictError("Credentials taken") from exc
    db.refresh(user)

    logger.info("New user signed up (id=%s)", user.id)
    return create_access_token(user.id, user.email)


def login(db: Session, *, email: str, password: str) -> str:
    user = authenticate_user(db, email=email, password=password)
    if user is None:
        logger.warning("Failed login attempt")
        raise UnauthorizedError("Credentials incorrect")
    return create_access_token(user.id, user.email)
