"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata
before create_all() runs.
"""

from sqlalchemy.engine import Engine

from app.db.session import engine as default_engine
from app.models.base import Base
from app.models import bookmark, user  # noqa: F401


def init_db(engine: Engine | None = None) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine or default_engine)
