# landing_builder/domain/templates.py
from typing import Any, Dict, List

DEFAULT_TEMPLATE = "startup"

BORDER_RADIUS_MODES = ("sharp", "rounded", "pill")
SPACING_MODES = ("compact", "normal", "spacious")

FONTS: List[Dict[str, str]] = [
    {"name": "Inter", "value": "Inter"},
    {"name": "Space Grotesk", "value": "Space Grotesk"},
    {"name": "DM Sans", "value": "DM Sans"},
    {"name": "Poppins", "value": "Poppins"},
    {"name": "Outfit", "value": "Outfit"},
    {"name": "Sora", "value": "Sora"},
]

COLOR_PRESETS: List[Dict[str, str]] = [
    {"name": "Emerald", "primary": "#22c55e", "background": "#0a0a0b", "card": "#161618", "text": "#fafafa", "muted": "#a1a1aa"},
    {"name": "Ocean", "primary": "#3b82f6", "background": "#0a0a0b", "card": "#161618", "text": "#fafafa", "muted": "#a1a1aa"},
    {"name": "Purple", "primary": "#8b5cf6", "background": "#0a0a0b", "card": "#161618", "text": "#fafafa", "muted": "#a1a1aa"},
    {"name": "Rose", "primary": "#f43f5e", "background": "#0a0a0b", "card": "#161618", "text": "#fafafa", "muted": "#a1a1aa"},
    {"name": "Orange", "primary": "#f97316", "background": "#0a0a0b", "card": "#161618", "text": "#fafafa", "muted": "#a1a1aa"},
    {"name": "Cyan", "primary": "#06b6d4", "background": "#0a0a0b", "card": "#161618", "text": "#fafafa", "muted": "#a1a1aa"},
    {"name": "Light Minimal", "primary": "#18181b", "background": "#ffffff", "card": "#f4f4f5", "text": "#18181b", "muted": "#71717a"},
    {"name": "Light Blue", "primary": "#2563eb", "background": "#ffffff", "card": "#f8fafc", "text": "#0f172a", "muted": "#64748b"},
    {"name": "Warm", "primary": "#ea580c", "background": "#fffbeb", "card": "#fef3c7", "text": "#78350f", "muted": "#92400e"},
]

GRADIENTS: List[Dict[str, str]] = [
    {"name": "None", "value": "none"},
    {"name": "Subtle Glow", "value": "radial-gradient(ellipse at top, rgba(34,197,94,0.15) 0%, transparent 50%)"},
    {"name": "Top Fade", "value": "linear-gradient(to bottom, rgba(34,197,94,0.1) 0%, transparent 30%)"},
    {"name": "Mesh", "value": "radial-gradient(at 40% 20%, rgba(34,197,94,0.2) 0px, transparent 50%), radial-gradient(at 80% 0%, rgba(59,130,246,0.15) 0px, transparent 50%)"},
    {"name": "Aurora", "value": "linear-gradient(to right, rgba(34,197,94,0.1), rgba(59,130,246,0.1), rgba(139,92,246,0.1))"},
]

# Theme tokens every document starts from; templates override a subset.
DEFAULT_GLOBAL_STYLES: Dict[str, Any] = {
    "font": "Inter",
    "primaryColor": "#22c55e",
    "backgroundColor": "#0a0a0b",
    "cardColor": "#161618",
    "textColor": "#fafafa",
    "mutedColor": "#a1a1aa",
    "borderColor": "#27272a",
    "borderRadius": "rounded",
    "spacing": "normal",
    "backgroundGradient": "none",
}

DEFAULT_META: Dict[str, str] = {"title": "", "description": ""}

DEFAULT_SOCIAL_LINKS: Dict[str, str] = {
    "twitter": "",
    "github": "",
    "linkedin": "",
    "website": "",
}

TEMPLATES: Dict[str, Dict[str, Any]] = {
    "startup": {
        "name": "Startup",
        "description": "Clean and modern, perfect for SaaS and tech products",
        "preview": "🚀",
        "defaultStyles": {
            "font": "Inter",
            "primaryColor": "#22c55e",
            "backgroundColor": "#0a0a0b",
            "borderRadius": "rounded",
        },
        "sections": ["hero", "features", "howItWorks", "cta", "footer"],
    },
    "minimal": {
        "name": "Minimal",
        "description": "Simple and elegant, focuses on the essentials",
        "preview": "✨",
        "defaultStyles": {
            "font": "DM Sans",
            "primaryColor": "#18181b",
            "backgroundColor": "#ffffff",
            "borderRadius": "rounded",
        },
        "sections": ["hero", "features", "cta", "footer"],
    },
    "bold": {
        "name": "Bold",
        "description": "High contrast with strong visual impact",
        "preview": "💪",
        "defaultStyles": {
            "font": "Space Grotesk",
            "primaryColor": "#f43f5e",
            "backgroundColor": "#0a0a0b",
            "borderRadius": "sharp",
        },
        "sections": ["hero", "features", "testimonials", "pricing", "cta", "footer"],
    },
    "waitlist": {
        "name": "Waitlist",
        "description": "Pre-launch page with countdown and email capture",
        "preview": "⏰",
        "defaultStyles": {
            "font": "Outfit",
            "primaryColor": "#8b5cf6",
            "backgroundColor": "#0a0a0b",
            "borderRadius": "pill",
        },
        "sections": ["hero", "countdown", "features", "cta", "footer"],
    },
    "product": {
        "name": "Product",
        "description": "Full-featured with pricing and testimonials",
        "preview": "📦",
        "defaultStyles": {
            "font": "Poppins",
            "primaryColor": "#3b82f6",
            "backgroundColor": "#0a0a0b",
            "borderRadius": "rounded",
        },
        "sections": [
            "hero", "logos", "features", "howItWorks", "testimonials",
            "pricing", "faq", "cta", "footer",
        ],
    },
}


def get_template(name):
    """Template descriptor for `name`, or the startup template when unknown."""
    return TEMPLATES[resolve_template_name(name)]


def resolve_template_name(name) -> str:
    if isinstance(name, str) and name in TEMPLATES:
        return name
    return DEFAULT_TEMPLATE


def list_templates() -> List[Dict[str, Any]]:
    return [
        {
            "key": key,
            "name": t["name"],
            "description": t["description"],
            "preview": t["preview"],
            "sections": list(t["sections"]),
        }
        for key, t in TEMPLATES.items()
    ]


def template_styles(name) -> Dict[str, Any]:
    styles = dict(DEFAULT_GLOBAL_STYLES)
    styles.update(get_template(name)["defaultStyles"])
    return styles


def find_color_preset(name):
    for preset in COLOR_PRESETS:
        if preset["name"] == name:
            return preset
    return None
