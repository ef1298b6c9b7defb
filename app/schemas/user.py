# File: app/schemas/user.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes as camelCase; accepts camelCase or snake_case input."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True  # Pydantic v2: replaces orm_mode


class UserBase(CamelModel):
    email: EmailStr


class UserUpdate(CamelModel):
    email: Optional[EmailStr] = None
    first_name: Optional[str] = Field(default=None, max_length=255)
    last_name: Optional[str] = Field(default=None, max_length=255)


class UserRead(UserBase):
    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime
