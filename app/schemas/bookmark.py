# File: app/schemas/bookmark.py

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.user import CamelModel


class BookmarkBase(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    link: str = Field(min_length=1, max_length=2048)
    description: Optional[str] = None


class BookmarkCreate(BookmarkBase):
    pass


class BookmarkUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    link: Optional[str] = Field(default=None, min_length=1, max_length=2048)
    description: Optional[str] = None


class BookmarkRead(BookmarkBase):
    id: int
    user_id: int
    created_at: datetime
    updated_at: datetime
