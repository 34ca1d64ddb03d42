# landing_builder/application/landing/record_page_view.py
from typing import Optional
from landing_builder.extensions import db
from landing_builder.models.landing_page_view import PageView
from landing_builder.utils.transaction import transactional


def record_page_view(
    *,
    project_id: str,
    referrer: Optional[str] = None,
    user_agent: Optional[str] = None,
) -> PageView:
    """Stores one view of a published landing page."""
    with transactional():
        view = PageView()
        view.project_id = project_id
        view.referrer = referrer
        view.user_agent = user_agent
        db.session.add(view)

    return view
