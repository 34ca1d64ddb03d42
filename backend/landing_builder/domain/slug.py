# landing_builder/domain/slug.py
import re
from typing import Optional
from urllib.parse import quote, urlencode

from landing_builder.domain.errors import InvalidSlug

SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")

_DISALLOWED = re.compile(r"[^a-z0-9-]")


def validate_slug(slug) -> str:
    """Return `slug` unchanged if it is a valid public path segment."""
    if not isinstance(slug, str) or not SLUG_PATTERN.fullmatch(slug):
        raise InvalidSlug(
            "URL slug may only contain lowercase letters, numbers and hyphens."
        )
    return slug


def clean_slug_input(text: str) -> str:
    """What the editor's slug field keeps of free-form input while typing."""
    return _DISALLOWED.sub("", (text or "").lower())


def public_path(slug: str, ref: Optional[str] = None) -> str:
    path = f"/p/{quote(slug)}"
    if ref:
        path = f"{path}?{urlencode({'ref': ref})}"
    return path


def public_url(base_url: str, slug: str, ref: Optional[str] = None) -> str:
    return base_url.rstrip("/") + public_path(slug, ref)
