"""Business logic services."""

from app.services.coach_service import CoachService

__all__ = ["CoachService"]
