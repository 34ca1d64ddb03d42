# landing_builder/application/landing/landing_page_analytics.py
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional
from sqlalchemy import select
from landing_builder.domain.analytics import RECENT_SIGNUPS, summarize
from landing_builder.extensions import db
from landing_builder.models.landing_page_signup import Signup
from landing_builder.models.landing_page_view import PageView


def landing_page_analytics(
    *,
    project_id: str,
    today: Optional[date] = None,
) -> Dict[str, Any]:
    """Views, signups and conversion for one project's landing page."""
    view_times = db.session.execute(
        select(PageView.created_at).where(PageView.project_id == project_id)
    ).scalars().all()

    signups = db.session.execute(
        select(Signup)
        .where(Signup.project_id == project_id)
        .order_by(Signup.created_at.desc())
    ).scalars().all()

    summary = summarize(
        view_times,
        [s.created_at for s in signups],
        today=today or datetime.now(timezone.utc).date(),
    )
    summary["recent_signups"] = [s.to_dict() for s in signups[:RECENT_SIGNUPS]]
    return summary
