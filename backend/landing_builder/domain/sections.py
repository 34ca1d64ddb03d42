# landing_builder/domain/sections.py
"""
Section registry.

Single source of truth for the section variants a landing page can hold:
their display metadata and the placeholder content a new section starts
with. The catalog is plain data; there is no per-variant behaviour beyond
picking defaults for a type tag.
"""
import itertools
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional

from landing_builder.domain.clone import clone_value
from landing_builder.domain.invariants.exceptions import InvariantViolation

IdFactory = Callable[[str], str]

DEFAULT_SECTION_TYPE = "features"

SECTION_TYPES: List[Dict[str, str]] = [
    {"type": "hero", "name": "Hero", "icon": "🎯", "description": "Main headline and CTA"},
    {"type": "features", "name": "Features", "icon": "✨", "description": "Feature grid or list"},
    {"type": "howItWorks", "name": "How It Works", "icon": "📋", "description": "Step by step process"},
    {"type": "testimonials", "name": "Testimonials", "icon": "💬", "description": "Customer quotes"},
    {"type": "pricing", "name": "Pricing", "icon": "💰", "description": "Pricing plans"},
    {"type": "faq", "name": "FAQ", "icon": "❓", "description": "Common questions"},
    {"type": "cta", "name": "CTA", "icon": "🚀", "description": "Call to action section"},
    {"type": "countdown", "name": "Countdown", "icon": "⏰", "description": "Launch countdown timer"},
    {"type": "video", "name": "Video", "icon": "🎬", "description": "Embedded video"},
    {"type": "logos", "name": "Logo Cloud", "icon": "🏢", "description": "Trusted by logos"},
    {"type": "footer", "name": "Footer", "icon": "📍", "description": "Page footer"},
]

KNOWN_TYPES = frozenset(t["type"] for t in SECTION_TYPES)

# Placeholder content per variant. Never handed out directly: create_default
# clones it so sections never share nested lists.
SECTION_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "hero": {
        "layout": "centered",
        "headline": "Your Headline Here",
        "subheadline": "Describe your value proposition in one or two sentences.",
        "ctaText": "Join Waitlist",
        "ctaSubtext": "No spam, unsubscribe anytime",
        "showImage": False,
        "image": None,
        "showBadge": True,
        "badge": "🚀 Coming Soon",
    },
    "features": {
        "layout": "grid",
        "headline": "Why Choose Us",
        "subheadline": "Everything you need to validate your idea",
        "items": [
            {"icon": "⚡", "title": "Fast", "description": "Get results in minutes, not weeks"},
            {"icon": "🎯", "title": "Targeted", "description": "Find your ideal customers"},
            {"icon": "📊", "title": "Data-Driven", "description": "Make decisions based on real signals"},
        ],
    },
    "howItWorks": {
        "headline": "How It Works",
        "subheadline": "Get started in 3 easy steps",
        "steps": [
            {"number": "1", "title": "Sign Up", "description": "Create your free account"},
            {"number": "2", "title": "Configure", "description": "Set up your preferences"},
            {"number": "3", "title": "Launch", "description": "Go live in minutes"},
        ],
    },
    "testimonials": {
        "headline": "What People Say",
        "items": [
            {"quote": "Can't wait to try this!", "author": "Early User", "role": "Founder"},
            {"quote": "Finally, a solution that makes sense.", "author": "Beta Tester", "role": "Developer"},
        ],
    },
    "pricing": {
        "headline": "Simple Pricing",
        "subheadline": "Choose the plan that works for you",
        "plans": [
            {
                "name": "Free",
                "price": "$0",
                "period": "/month",
                "features": ["Basic features", "Community support"],
                "cta": "Get Started",
                "highlighted": False,
            },
            {
                "name": "Pro",
                "price": "$29",
                "period": "/month",
                "features": ["Everything in Free", "Priority support", "Advanced features"],
                "cta": "Start Trial",
                "highlighted": True,
            },
        ],
    },
    "faq": {
        "headline": "Frequently Asked Questions",
        "items": [
            {"question": "When will this launch?", "answer": "We're launching soon! Join the waitlist to be notified."},
            {"question": "Is there a free tier?", "answer": "Yes, we'll have a generous free tier for everyone."},
            {"question": "How do I get support?", "answer": "Email us anytime and we'll get back to you within 24 hours."},
        ],
    },
    "cta": {
        "headline": "Ready to Get Started?",
        "subheadline": "Join the waitlist and be the first to know when we launch.",
        "ctaText": "Join Waitlist",
        "showEmail": True,
    },
    "countdown": {
        "headline": "Launching Soon",
        "targetDate": None,
    },
    "video": {
        "headline": "See It In Action",
        "videoUrl": "",
    },
    "logos": {
        "headline": "Trusted By",
        "logos": [],
    },
    "footer": {
        "showSocial": True,
        "copyright": "© All rights reserved.",
        "links": [],
    },
}


class SequentialIds:
    """
    Monotonic id source: "<type>-<n>".

    Thread-safe, unique for the lifetime of the instance. Tests inject their
    own instance to get deterministic ids.
    """

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def __call__(self, section_type: str) -> str:
        with self._lock:
            n = next(self._counter)
        return f"{section_type}-{n}"


def uuid_ids(section_type: str) -> str:
    return f"{section_type}-{uuid.uuid4().hex[:12]}"


def _launch_date() -> str:
    return (datetime.now(timezone.utc) + timedelta(days=14)).isoformat()


@dataclass(frozen=True)
class Section:
    """One typed content block. `fields` holds the variant payload."""

    id: str
    type: str
    visible: bool = True
    fields: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = {"id": self.id, "type": self.type, "visible": self.visible}
        data.update(clone_value(self.fields))
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Section":
        payload = {
            k: clone_value(v)
            for k, v in data.items()
            if k not in ("id", "type", "visible")
        }
        visible = True if data.get("visible") is None else data["visible"]
        if not isinstance(visible, bool):
            raise InvariantViolation(f"Section {data['id']} visible must be true or false.")
        return cls(
            id=str(data["id"]),
            type=data["type"],
            visible=visible,
            fields=payload,
        )


def list_types() -> List[Dict[str, str]]:
    """Ordered variant descriptors for the "add section" menu."""
    return [dict(t) for t in SECTION_TYPES]


def is_known_type(section_type: Optional[str]) -> bool:
    return isinstance(section_type, str) and section_type in KNOWN_TYPES


def create_default(
    section_type: str,
    id_factory: Optional[IdFactory] = None,
) -> Section:
    """
    Build a new section of `section_type` populated with placeholder content.

    Unknown types fall back to DEFAULT_SECTION_TYPE instead of failing.
    """
    if not is_known_type(section_type):
        section_type = DEFAULT_SECTION_TYPE

    fields = clone_value(SECTION_DEFAULTS[section_type])
    if section_type == "countdown":
        fields["targetDate"] = _launch_date()

    make_id = id_factory or uuid_ids
    return Section(
        id=make_id(section_type),
        type=section_type,
        visible=True,
        fields=fields,
    )
