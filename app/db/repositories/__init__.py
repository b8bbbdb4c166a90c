"""Database repositories."""

from app.db.repositories.history import HistoryRepository

__all__ = ["HistoryRepository"]
