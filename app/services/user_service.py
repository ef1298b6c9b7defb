# File: app/services/user_service.py

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError
from app.models.user import User
from app.schemas.user import UserUpdate


def get_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError(f"User {user_id} not found")
    return user


def email_taken(db: Session, email: str, *, exclude_user_id: int) -> bool:
    stmt = select(User.id).where(User.email == email, User.id != exclude_user_id)
    return db.scalar(stmt) is not None


def edit_user(db: Session, user_id: int, changes: UserUpdate) -> User:
    """
    Apply the fields present in `changes` to the user.

    An explicit null for email is ignored since the column is required;
    null for a name clears it.
    """
    user = get_user(db, user_id)
    data = changes.model_dump(exclude_unset=True)
    if data.get("email") is None:
        data.pop("email", None)

    new_email = data.get("email")
    if new_email is not None and new_email != user.email:
        if email_taken(db, new_email, exclude_user_id=user_id):
            raise ConflictError("Email already in use")

    for field, value in data.items():
        setattr(user, field, value)

    try:
        db.commit()
    except IntegrityError as exc:
        # Another user claimed the email between the check and the commit
        db.rollback()
        raise ConflictError("Email already in use") from exc
    db.refresh(user)
    return user
