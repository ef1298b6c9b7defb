# File: app/core/logging.py

"""
Logging setup for the Bookmarks API.

Every module logs through a child of the "bookmarks" logger, e.g.
logging.getLogger("bookmarks.auth"). configure_logging() is called once
by the application factory.
"""

import logging

from app.core.config import settings


LOG_FORMAT = "%(asctime)s %(levelname)-5s %(name)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )
