# landing_builder/application/landing/capture_signup.py
from typing import Any, Dict, Optional
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from landing_builder.domain.signups import build_referrer, normalize_email
from landing_builder.extensions import db
from landing_builder.models.landing_page_signup import Signup
from landing_builder.utils.transaction import transactional


def _existing(project_id: str, email: str) -> Optional[Signup]:
    return db.session.execute(
        select(Signup).where(Signup.project_id == project_id, Signup.email == email)
    ).scalar_one_or_none()


def capture_signup(
    *,
    project_id: str,
    email: str,
    ref: Optional[str] = None,
    referrer: Optional[str] = None,
    source: str = "landing_page",
) -> Dict[str, Any]:
    """
    Adds an address to a project's waitlist.

    Responsibilities:
    - email validation and lowercasing
    - one signup per address per project
    - folding the tracking ref into the stored referrer

    Signing up twice is not an error: the existing signup is returned
    with created=False.
    """

    # 1️⃣ Validate
    email = normalize_email(email)

    # 2️⃣ Duplicate check
    existing = _existing(project_id, email)
    if existing is not None:
        return {"created": False, "signup": existing.to_dict()}

    # 3️⃣ Insert
    signup = Signup()
    signup.project_id = project_id
    signup.email = email
    signup.referrer = build_referrer(ref, referrer)
    signup.source = source

    try:
        with transactional():
            db.session.add(signup)
    except IntegrityError:
        # Lost a race with the same address; the unique constraint kept one row.
        existing = _existing(project_id, email)
        if existing is None:
            raise
        return {"created": False, "signup": existing.to_dict()}

    return {"created": True, "signup": signup.to_dict()}
