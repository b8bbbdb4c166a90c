"""Trend alerts shown next to the check-in result."""

from app.schemas.coach import TrendAlert
from app.schemas.trends import CheckInTrends

RESET_ALERT_COUNT = 5


def trend_alerts(trends: CheckInTrends) -> list[TrendAlert]:
    """Heads-ups derived from check-in trends, most serious first.

    Weekly worsening is only reported when the stronger progressive
    pattern is not already flagged.
    """
    alerts: list[TrendAlert] = []
    if trends.progressive_worsening:
        alerts.append(TrendAlert(
            code="progressive_worsening",
            message="Pain has increased 3 check-ins in a row. "
                    "Consider resting or consulting a professional.",
        ))
    elif trends.pain_direction == "worsening":
        alerts.append(TrendAlert(
            code="pain_worsening",
            message=f"Average pain this week ({trends.weekly_avg_pain:.1f}) is higher "
                    f"than last week ({trends.previous_week_avg_pain:.1f}).",
        ))
    if trends.recent_reset_count >= RESET_ALERT_COUNT:
        alerts.append(TrendAlert(
            code="frequent_reset",
            message=f"{trends.recent_reset_count} of your recent days were in RESET mode. "
                    "If this persists, consider seeing a physio.",
        ))
    return alerts
