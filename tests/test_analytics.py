"""Tests for the landing page analytics summary."""

from __future__ import annotations

from datetime import date, datetime

from landing_builder.domain.analytics import conversion_rate, summarize

TODAY = date(2026, 3, 14)


def test_conversion_rate() -> None:
    assert conversion_rate(0, 3) == 0.0
    assert conversion_rate(3, 1) == 33.3
    assert conversion_rate(4, 2) == 50.0


def test_summary_counts_and_daily_breakdown() -> None:
    views = [
        datetime(2026, 3, 14, 9, 0),
        datetime(2026, 3, 14, 18, 30),
        datetime(2026, 3, 10, 12, 0),
        datetime(2026, 2, 1, 12, 0),
    ]
    signups = [datetime(2026, 3, 14, 9, 5)]

    summary = summarize(views, signups, today=TODAY)

    assert summary["views"] == 4
    assert summary["days_with_views"] == 3
    assert summary["signups"] == 1
    assert summary["conversion_rate"] == 25.0

    daily = summary["daily"]
    assert len(daily) == 7
    assert daily[0]["date"] == "2026-03-08"
    assert daily[-1] == {"date": "2026-03-14", "label": "Sat", "views": 2, "signups": 1}
    assert daily[2]["views"] == 1
    assert sum(d["views"] for d in daily) == 3


def test_empty_summary() -> None:
    summary = summarize([], [], today=TODAY)
    assert summary["views"] == 0
    assert summary["conversion_rate"] == 0.0
    assert all(d["views"] == 0 and d["signups"] == 0 for d in summary["daily"])
