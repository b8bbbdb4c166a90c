"""
Database initialization.

Creates all tables for the history store.
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

import app.db.base  # noqa: F401  registers every table on SQLModel.metadata
from app.db.session import get_engine

logger = logging.getLogger(__name__)


def init_db(engine: Optional[Engine] = None) -> None:
    """Create every history-store table that does not exist yet."""
    engine = engine or get_engine()
    logger.info("Creating database tables on %s", engine.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(engine)
    logger.info("Tables created: %s", ", ".join(sorted(SQLModel.metadata.tables)))


if __name__ == "__main__":
    from app.core.logging import configure_logging

    configure_logging()
    init_db()
