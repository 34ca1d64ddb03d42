# landing_builder/domain/document.py
"""
Landing page document model.

A Document is an immutable value: every operation below returns a new
Document and leaves its input untouched, because the editor history keeps
references to earlier documents. Operations that find nothing to change
return the input object itself so callers can skip recording a no-op.
"""
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Tuple

from landing_builder.domain.clone import clone_value
from landing_builder.domain.invariants.exceptions import InvalidIndex, InvariantViolation
from landing_builder.domain.sections import IdFactory, Section, create_default, uuid_ids
from landing_builder.domain.templates import (
    BORDER_RADIUS_MODES,
    DEFAULT_GLOBAL_STYLES,
    DEFAULT_META,
    DEFAULT_SOCIAL_LINKS,
    DEFAULT_TEMPLATE,
    SPACING_MODES,
    find_color_preset,
    resolve_template_name,
)

APPEND = -1

# Global style tokens restricted to a fixed set of modes.
ENUMERATED_STYLES = {
    "borderRadius": BORDER_RADIUS_MODES,
    "spacing": SPACING_MODES,
}


@dataclass(frozen=True)
class Document:
    sections: Tuple[Section, ...] = ()
    global_styles: Dict[str, Any] = field(default_factory=lambda: dict(DEFAULT_GLOBAL_STYLES))
    meta: Dict[str, Any] = field(default_factory=lambda: dict(DEFAULT_META))
    social_links: Dict[str, Any] = field(default_factory=lambda: dict(DEFAULT_SOCIAL_LINKS))
    template: str = DEFAULT_TEMPLATE

    def __len__(self) -> int:
        return len(self.sections)

    @property
    def section_ids(self) -> Tuple[str, ...]:
        return tuple(s.id for s in self.sections)

    def find_section(self, section_id: str) -> Optional[Section]:
        index = _index_of(self, section_id)
        return None if index is None else self.sections[index]

    def to_dict(self) -> Dict[str, Any]:
        """Persisted / wire shape shared with the editor front-end."""
        return {
            "template": self.template,
            "sections": [s.to_dict() for s in self.sections],
            "globalStyles": clone_value(self.global_styles),
            "meta": clone_value(self.meta),
            "socialLinks": clone_value(self.social_links),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Document":
        if not isinstance(data, Mapping):
            raise InvariantViolation("Landing page document must be an object.")

        raw_sections = data.get("sections") or []
        if not isinstance(raw_sections, list):
            raise InvariantViolation("Document sections must be a list.")

        sections = []
        for raw in raw_sections:
            if not isinstance(raw, Mapping) or "id" not in raw or "type" not in raw:
                raise InvariantViolation("Every section needs an id and a type.")
            sections.append(Section.from_dict(dict(raw)))

        return cls(
            sections=tuple(sections),
            global_styles=_merged(DEFAULT_GLOBAL_STYLES, data.get("globalStyles")),
            meta=_merged(DEFAULT_META, data.get("meta")),
            social_links=_merged(DEFAULT_SOCIAL_LINKS, data.get("socialLinks")),
            template=resolve_template_name(data.get("template")),
        )


def _merged(defaults: Mapping[str, Any], overrides: Any) -> Dict[str, Any]:
    merged = dict(defaults)
    if isinstance(overrides, Mapping):
        merged.update(clone_value(dict(overrides)))
    return merged


def _index_of(doc: Document, section_id: str) -> Optional[int]:
    for index, section in enumerate(doc.sections):
        if section.id == section_id:
            return index
    return None


def _check_index(doc: Document, index: int) -> None:
    if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(doc.sections):
        raise InvalidIndex(index, len(doc.sections))


def _fresh_id(doc: Document, section_type: str, id_factory: Optional[IdFactory]) -> str:
    # Loaded documents may already hold ids from an earlier process.
    make_id = id_factory or uuid_ids
    taken = set(doc.section_ids)
    new_id = make_id(section_type)
    while new_id in taken:
        new_id = make_id(section_type)
    return new_id


def _with_sections(doc: Document, sections) -> Document:
    return replace(doc, sections=tuple(sections))


# ------------------------
# Section operations
# ------------------------

def update_section(doc: Document, section_id: str, partial: Mapping[str, Any]) -> Document:
    """
    Shallow-merge `partial` into a section. `visible` may be set this way;
    `id` and `type` may not change. Unknown ids are a no-op.
    """
    index = _index_of(doc, section_id)
    if index is None:
        return doc

    section = doc.sections[index]
    changes = dict(partial)

    for reserved in ("id", "type"):
        if reserved in changes:
            if changes.pop(reserved) != getattr(section, reserved):
                raise InvariantViolation(
                    f"Section {reserved} cannot be changed in place ({section.id})."
                )

    visible = changes.pop("visible", section.visible)
    if not isinstance(visible, bool):
        raise InvariantViolation(f"Section visible must be true or false ({section.id}).")
    fields = dict(section.fields)
    fields.update(clone_value(changes))

    sections = list(doc.sections)
    sections[index] = replace(section, visible=visible, fields=fields)
    return _with_sections(doc, sections)


def move_section(doc: Document, from_index: int, to_index: int) -> Document:
    """Relocate one section: remove at `from_index`, reinsert at `to_index`."""
    _check_index(doc, from_index)
    _check_index(doc, to_index)
    if from_index == to_index:
        return doc

    sections = list(doc.sections)
    moved = sections.pop(from_index)
    sections.insert(to_index, moved)
    return _with_sections(doc, sections)


def add_section(
    doc: Document,
    section_type: str,
    after_index: int = APPEND,
    id_factory: Optional[IdFactory] = None,
) -> Tuple[Document, str]:
    """
    Insert a default section of `section_type` right after `after_index`
    (APPEND puts it last). Returns the new document and the new section id.
    """
    if after_index != APPEND:
        _check_index(doc, after_index)

    section = create_default(section_type, id_factory=id_factory)
    if section.id in doc.section_ids:
        section = replace(section, id=_fresh_id(doc, section.type, id_factory))

    sections = list(doc.sections)
    position = len(sections) if after_index == APPEND else after_index + 1
    sections.insert(position, section)
    return _with_sections(doc, sections), section.id


def delete_section(doc: Document, section_id: str) -> Document:
    index = _index_of(doc, section_id)
    if index is None:
        return doc
    sections = list(doc.sections)
    del sections[index]
    return _with_sections(doc, sections)


def duplicate_section(
    doc: Document,
    section_id: str,
    id_factory: Optional[IdFactory] = None,
) -> Document:
    """Insert a structural copy of a section, with a new id, right after it."""
    index = _index_of(doc, section_id)
    if index is None:
        return doc

    original = doc.sections[index]
    copy = Section(
        id=_fresh_id(doc, original.type, id_factory),
        type=original.type,
        visible=original.visible,
        fields=clone_value(original.fields),
    )

    sections = list(doc.sections)
    sections.insert(index + 1, copy)
    return _with_sections(doc, sections)


def toggle_visibility(doc: Document, section_id: str) -> Document:
    index = _index_of(doc, section_id)
    if index is None:
        return doc
    sections = list(doc.sections)
    sections[index] = replace(sections[index], visible=not sections[index].visible)
    return _with_sections(doc, sections)


# ------------------------
# Global configuration
# ------------------------

def update_global_style(doc: Document, key: str, value: Any) -> Document:
    allowed = ENUMERATED_STYLES.get(key)
    if allowed is not None and value not in allowed:
        raise InvariantViolation(
            f"{key} must be one of {', '.join(allowed)} (got {value!r})."
        )
    styles = dict(doc.global_styles)
    styles[key] = value
    return replace(doc, global_styles=styles)


def apply_color_preset(doc: Document, preset_name: str) -> Document:
    preset = find_color_preset(preset_name)
    if preset is None:
        raise InvariantViolation(f"Unknown color preset: {preset_name}")

    styles = dict(doc.global_styles)
    styles.update({
        "primaryColor": preset["primary"],
        "backgroundColor": preset["background"],
        "cardColor": preset["card"],
        "textColor": preset.get("text", "#fafafa"),
        "mutedColor": preset.get("muted", "#a1a1aa"),
    })
    return replace(doc, global_styles=styles)


def update_meta(doc: Document, partial: Mapping[str, Any]) -> Document:
    meta = dict(doc.meta)
    meta.update(partial)
    return replace(doc, meta=meta)


def update_social_links(doc: Document, partial: Mapping[str, Any]) -> Document:
    links = dict(doc.social_links)
    links.update(partial)
    return replace(doc, social_links=links)
