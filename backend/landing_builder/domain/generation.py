# landing_builder/domain/generation.py
"""
Generation bridge: template + AI copy payload -> initial Document.

The payload comes from an LLM and is untrusted. Anything missing or
malformed degrades to the template's placeholder content; building a
document from a template never fails.
"""
import json
import logging
import re
from dataclasses import replace
from typing import Any, Dict, Mapping, Optional

from landing_builder.domain.clone import clone_value
from landing_builder.domain.document import Document
from landing_builder.domain.errors import GenerationFailure
from landing_builder.domain.sections import IdFactory, create_default
from landing_builder.domain.templates import (
    DEFAULT_META,
    DEFAULT_SOCIAL_LINKS,
    get_template,
    resolve_template_name,
    template_styles,
)

logger = logging.getLogger(__name__)

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")

# Overlay keys that would break section identity.
_RESERVED_KEYS = ("id", "type")


def parse_generated_copy(text: str) -> Dict[str, Any]:
    """
    Pull the JSON object out of raw model output (which may wrap it in
    prose or code fences).
    """
    match = _JSON_OBJECT.search(text or "")
    if not match:
        raise GenerationFailure("No JSON found in generated copy")
    try:
        data = json.loads(match.group(0))
    except ValueError as exc:
        raise GenerationFailure(f"Generated copy is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise GenerationFailure("Generated copy must be a JSON object")
    return data


def section_overlays(payload: Any) -> Dict[str, Dict[str, Any]]:
    """
    Normalize the payload's `sections` into {section type: overlay fields}.

    Accepts either a mapping keyed by type or the list form the model
    returns ([{"type": ..., ...}]); the first entry per type wins.
    """
    if not isinstance(payload, Mapping):
        return {}

    sections = payload.get("sections")
    overlays: Dict[str, Dict[str, Any]] = {}

    if isinstance(sections, Mapping):
        for section_type, fields in sections.items():
            if isinstance(fields, Mapping):
                overlays[section_type] = dict(fields)
    elif isinstance(sections, list):
        for item in sections:
            if isinstance(item, Mapping) and isinstance(item.get("type"), str):
                overlays.setdefault(item["type"], dict(item))

    for fields in overlays.values():
        for key in _RESERVED_KEYS:
            fields.pop(key, None)
    return overlays


def _meta_overlay(payload: Any) -> Dict[str, str]:
    if not isinstance(payload, Mapping):
        return {}
    meta = payload.get("meta")
    if not isinstance(meta, Mapping):
        return {}
    return {k: v for k, v in meta.items() if k in DEFAULT_META and isinstance(v, str)}


def build_document(
    template_name: Optional[str],
    payload: Any = None,
    *,
    id_factory: Optional[IdFactory] = None,
    meta_defaults: Optional[Mapping[str, str]] = None,
) -> Document:
    """
    Seed a document from `template_name`, overlaying generated copy keyed
    by section type. Unknown templates fall back to the startup template.
    """
    template_key = resolve_template_name(template_name)
    template = get_template(template_key)

    if payload is not None and not isinstance(payload, Mapping):
        logger.warning(
            "Ignoring malformed generated copy for template %s (%s)",
            template_key, type(payload).__name__,
        )
        payload = None

    overlays = section_overlays(payload)

    sections = []
    for section_type in template["sections"]:
        section = create_default(section_type, id_factory=id_factory)
        overlay = dict(overlays.get(section.type) or {})
        if overlay:
            visible = overlay.pop("visible", section.visible)
            if not isinstance(visible, bool):
                visible = section.visible
            fields = dict(section.fields)
            fields.update(clone_value(overlay))
            section = replace(section, visible=visible, fields=fields)
        sections.append(section)

    meta = dict(DEFAULT_META)
    meta.update(meta_defaults or {})
    meta.update(_meta_overlay(payload))

    return Document(
        sections=tuple(sections),
        global_styles=template_styles(template_key),
        meta=meta,
        social_links=dict(DEFAULT_SOCIAL_LINKS),
        template=template_key,
    )
