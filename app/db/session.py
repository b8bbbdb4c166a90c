"""
Database session management.

Provides the SQLModel engine and per-request sessions.  The engine is
created on first use so that importing the app never opens a
connection.
"""

from functools import lru_cache
from typing import Generator

from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from app.core.config import settings


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Process-wide engine for ``settings.database_url``."""
    url = settings.database_url
    if url.startswith("sqlite"):
        return create_engine(
            url,
            echo=settings.DEBUG,
            connect_args={"check_same_thread": False},
        )
    return create_engine(
        url,
        echo=settings.DEBUG,  # Log SQL queries in debug mode
        pool_pre_ping=True,   # Verify connections before using
        pool_size=5,          # Connection pool size
        max_overflow=10       # Max connections beyond pool_size
    )


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance

    Example:
        @router.get("/history")
        def read_history(db: Session = Depends(get_db)):
            return HistoryRepository(db).read_history(user_id, region_id)
    """
    with Session(get_engine()) as session:
        yield session
