# landing_builder/domain/analytics.py
from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, List

ANALYTICS_DAYS = 7
RECENT_SIGNUPS = 10


def _day(value) -> date:
    return value.date() if isinstance(value, datetime) else value


def conversion_rate(views: int, signups: int) -> float:
    """Signups per hundred views, one decimal place."""
    if views <= 0:
        return 0.0
    return round(signups / views * 100, 1)


def summarize(
    view_times: Iterable[datetime],
    signup_times: Iterable[datetime],
    *,
    today: date,
    days: int = ANALYTICS_DAYS,
) -> Dict[str, Any]:
    """
    Totals plus a per-day breakdown of the last `days` days ending with
    `today`, oldest first.
    """
    view_days = [_day(t) for t in view_times if t is not None]
    signup_days = [_day(t) for t in signup_times if t is not None]

    daily: List[Dict[str, Any]] = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        daily.append({
            "date": day.isoformat(),
            "label": day.strftime("%a"),
            "views": view_days.count(day),
            "signups": signup_days.count(day),
        })

    return {
        "views": len(view_days),
        "days_with_views": len(set(view_days)),
        "signups": len(signup_days),
        "conversion_rate": conversion_rate(len(view_days), len(signup_days)),
        "daily": daily,
    }
