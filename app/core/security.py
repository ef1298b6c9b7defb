# File: app/core/security.py

"""
Security helpers for the Bookmarks API.

Passwords: bcrypt, salted per hash. bcrypt only looks at the first 72
bytes of input, so the schema layer rejects longer passwords.

Tokens: HS256 JWTs via python-jose, signed with settings.secret_key.
Claims are `sub` (user id as a string; RFC 7519 requires a string), `email`,
`iat` and `exp`. decode_access_token() returns None for anything it cannot
trust; the auth guard turns that into a 401.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import bcrypt
from jose import JWTError, jwt

from app.core.config import settings


ALGORITHM = settings.algorithm
ACCESS_TOKEN_EXPIRE_MINUTES = settings.access_token_expire_minutes
SECRET_KEY = settings.secret_key

# Largest value a signed 64-bit INTEGER primary key can hold
MAX_USER_ID = 2**63 - 1


def hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Malformed hash in the database
        return False


def create_access_token(
    user_id: int,
    email: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Issue a signed access token for the given user.

    The expiry defaults to ACCESS_TOKEN_EXPIRE_MINUTES; pass expires_delta
    to override it (a negative delta yields an already-expired token).
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode: dict[str, Any] = {
        "sub": str(user_id),
        "email": email,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> Optional[dict[str, Any]]:
    """
    Verify signature and expiry and return the claims.

    Returns None on any failure, including a payload whose `sub` is not an
    ASCII integer that fits a 64-bit key, or that lacks `email`.
    """
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None

    sub = payload.get("sub")
    if not isinstance(sub, str) or not (sub.isascii() and sub.isdigit()) or "email" not in payload:
        return None
    if int(sub) > MAX_USER_ID:
        return None
    return payload
