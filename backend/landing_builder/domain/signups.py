# landing_builder/domain/signups.py
"""
Waitlist signup rules for published landing pages.

Addresses are stored lowercased so the same person signing up twice with
different casing is recognised as one signup per project.
"""
import re
from typing import Optional

from landing_builder.domain.invariants.exceptions import InvalidEmail

EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")
MAX_EMAIL_LENGTH = 254
DIRECT = "direct"


def normalize_email(email) -> str:
    if not isinstance(email, str):
        raise InvalidEmail("Valid email required.")

    cleaned = email.strip().lower()
    if len(cleaned) > MAX_EMAIL_LENGTH or not EMAIL_PATTERN.fullmatch(cleaned):
        raise InvalidEmail("Valid email required.")
    return cleaned


def build_referrer(ref: Optional[str] = None, referrer: Optional[str] = None) -> str:
    """
    Referrer string stored with a signup or view.

    A tracking `ref` is folded in front of the HTTP referrer:
    "ref=<ref>|<referrer>", or just "ref=<ref>" for direct visits.
    """
    source = referrer or DIRECT
    if not ref:
        return source
    if source == DIRECT:
        return f"ref={ref}"
    return f"ref={ref}|{source}"
