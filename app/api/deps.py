# File: app/api/deps.py

from collections.abc import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.core.exceptions import UnauthorizedError
from app.core.security import decode_access_token
from app.db.session import SessionLocal
from app.models.user import User


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_bearer_token(request: Request) -> str | None:
    """Return the token from an `Authorization: Bearer <token>` header."""
    auth_header = request.headers.get("Authorization", "")
    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_current_user(request: Request, db: Session = Depends(get_db)) -> User:
    """
    Require a valid bearer token. Raises 401 otherwise.

    Usage in route functions:
        current_user: User = Depends(get_current_user)
    """
    token = get_bearer_token(request)
    if token is None:
        raise UnauthorizedError("Not authenticated")

    payload = decode_access_token(token)
    if payload is None:
        raise UnauthorizedError("Invalid or expired token")

    user = db.get(User, int(payload["sub"]))
    if user is None:
        raise UnauthorizedError("Invalid or expired token")

    request.state.user_id = user.id
    return user
