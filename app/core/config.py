# File: app/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    # Basic app info
    PROJECT_NAME: str = "Bookmarks API"
    VERSION: str = "0.1.0"

    debug: bool = os.getenv("DEBUG", "false").lower() in ("1", "true", "yes")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS
    backend_cors_origins: List[str] = Field(
        default=os.getenv("BACKEND_CORS_ORIGINS", ""),
        validate_default=True,
    )

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./bookmarks.db")

    # Security / auth
    secret_key: str = os.getenv("SECRET_KEY", "CHANGE_ME_IN_PRODUCTION")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "15"))
    algorithm: str = "HS256"

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
