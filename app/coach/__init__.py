"""Rehab coach engine: trends, mode cascade, plans, dosage and in-session rules."""

from app.coach.thresholds import DEFAULT_THRESHOLDS, CoachThresholds
from app.coach.trends import analyze_history

__all__ = ["CoachThresholds", "DEFAULT_THRESHOLDS", "analyze_history"]
