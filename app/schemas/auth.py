# File: app/schemas/auth.py

from pydantic import BaseModel, EmailStr, Field, field_validator


class AuthCredentials(BaseModel):
    """Body of both /auth/signup and /auth/login."""

    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("password")
    @classmethod
    def fits_bcrypt(cls, v: str) -> str:
        # bcrypt only accepts up to 72 bytes of input
        if len(v.encode("utf-8")) > 72:
            raise ValueError("password must be at most 72 bytes")
        return v


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
