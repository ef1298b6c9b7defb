# File: app/services/bookmark_service.py

"""
Bookmark CRUD, always scoped to the owning user.

A bookmark owned by somebody else is reported exactly like a missing one
so callers cannot probe for other users' ids.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.models.bookmark import Bookmark
from app.schemas.bookmark import BookmarkCreate, BookmarkUpdate

logger = logging.getLogger("bookmarks.bookmarks")

# Columns that may not be set to NULL through a partial update
_REQUIRED_FIELDS = {"title", "link"}


def list_bookmarks(db: Session, user_id: int) -> list[Bookmark]:
    stmt = select(Bookmark).where(Bookmark.user_id == user_id).order_by(Bookmark.id)
    return list(db.scalars(stmt))


def get_bookmark(db: Session, user_id: int, bookmark_id: int) -> Bookmark:
    bookmark = db.scalar(
        select(Bookmark).where(Bookmark.id == bookmark_id, Bookmark.user_id == user_id)
    )
    if bookmark is None:
        raise NotFoundError(f"Bookmark {bookmark_id} not found")
    return bookmark


def create_bookmark(db: Session, user_id: int, data: BookmarkCreate) -> Bookmark:
    bookmark = Bookmark(user_id=user_id, **data.model_dump())
    db.add(bookmark)
    db.commit()
    db.refresh(bookmark)
    logger.debug("Created bookmark %s for user %s", bookmark.id, user_id)
    return bookmark


def edit_bookmark(
    db: Session,
    user_id: int,
    bookmark_id: int,
    changes: BookmarkUpdate,
) -> Bookmark:
    bookmark = get_bookmark(db, user_id, bookmark_id)
    for field, value in changes.model_dump(exclude_unset=True).items():
        if value is None and field in _REQUIRED_FIELDS:
            continue
        setattr(bookmark, field, value)
    db.commit()
    db.refresh(bookmark)
    return bookmark


def delete_bookmark(db: Session, user_id: int, bookmark_id: int) -> None:
    bookmark = get_bookmark(db, user_id, bookmark_id)
    db.delete(bookmark)
    db.commit()
    logger.debug("Deleted bookmark %s for user %s", bookmark_id, user_id)
