"""Tests for seeding documents from templates plus generated copy."""

from __future__ import annotations

import pytest

from landing_builder.domain.errors import GenerationFailure
from landing_builder.domain.generation import build_document, parse_generated_copy
from landing_builder.domain.sections import SECTION_DEFAULTS, SequentialIds
from landing_builder.domain.templates import TEMPLATES


def test_startup_template_with_hero_headline_overlay() -> None:
    payload = {"sections": {"hero": {"headline": "Stop losing customers"}}}
    doc = build_document("startup", payload, id_factory=SequentialIds())

    assert [s.type for s in doc.sections] == ["hero", "features", "howItWorks", "cta", "footer"]
    hero = doc.sections[0]
    assert hero.fields["headline"] == "Stop losing customers"
    for key, value in SECTION_DEFAULTS["hero"].items():
        if key != "headline":
            assert hero.fields[key] == value, key
    for section in doc.sections[1:]:
        assert section.fields == SECTION_DEFAULTS[section.type]


def test_template_styles_are_applied() -> None:
    doc = build_document("bold")
    assert doc.template == "bold"
    assert doc.global_styles["font"] == "Space Grotesk"
    assert doc.global_styles["borderRadius"] == "sharp"
    assert doc.global_styles["spacing"] == "normal"


@pytest.mark.parametrize("template", sorted(TEMPLATES))
def test_every_template_builds_its_section_list(template: str) -> None:
    doc = build_document(template)
    assert [s.type for s in doc.sections] == TEMPLATES[template]["sections"]
    assert len(set(doc.section_ids)) == len(doc)


def test_unknown_template_falls_back_to_startup() -> None:
    doc = build_document("brutalist")
    assert doc.template == "startup"
    assert len(doc) == 5


def test_list_form_payload_from_model() -> None:
    payload = {
        "sections": [
            {"id": "hero-from-model", "type": "hero", "visible": True, "headline": "Ship faster"},
            {"type": "features", "items": [{"icon": "🔥", "title": "Hot", "description": "Very"}]},
            {"type": "hero", "headline": "Ignored second hero"},
            "garbage",
        ],
        "meta": {"title": "Ship - faster", "description": "SEO", "keywords": "dropped"},
    }
    doc = build_document("startup", payload, id_factory=SequentialIds())

    assert doc.sections[0].id == "hero-1"
    assert doc.sections[0].fields["headline"] == "Ship faster"
    assert doc.sections[1].fields["items"] == [{"icon": "🔥", "title": "Hot", "description": "Very"}]
    assert doc.meta == {"title": "Ship - faster", "description": "SEO"}


@pytest.mark.parametrize("name", [["startup"], {"key": "bold"}, None, 7])
def test_non_string_template_name_falls_back_to_startup(name) -> None:
    doc = build_document(name, id_factory=SequentialIds())
    assert doc.template == "startup"
    assert [s.type for s in doc.sections] == TEMPLATES["startup"]["sections"]


def test_overlay_with_non_bool_visible_keeps_default() -> None:
    payload = {"sections": {"cta": {"visible": "false", "headline": "Go"}}}
    doc = build_document("startup", payload, id_factory=SequentialIds())
    cta = doc.sections[3]
    assert cta.visible is True
    assert cta.fields["headline"] == "Go"


def test_overlay_cannot_change_section_type() -> None:
    payload = {"sections": {"hero": {"type": "faq", "id": "evil"}}}
    doc = build_document("minimal", payload)
    assert doc.sections[0].type == "hero"
    assert doc.sections[0].id != "evil"


@pytest.mark.parametrize(
    "payload",
    [None, "not json", 42, {"sections": "hero"}, {"sections": {"hero": "headline"}}, {"meta": []}],
)
def test_malformed_payload_falls_back_to_defaults(payload) -> None:
    doc = build_document("startup", payload)
    assert len(doc) == 5
    assert doc.sections[0].fields["headline"] == SECTION_DEFAULTS["hero"]["headline"]


def test_meta_defaults_used_when_payload_has_none() -> None:
    doc = build_document("startup", None, meta_defaults={"title": "Churn Radar", "description": "Pain"})
    assert doc.meta == {"title": "Churn Radar", "description": "Pain"}


def test_parse_generated_copy_strips_surrounding_text() -> None:
    text = 'Here you go:\n```json\n{"sections": [], "meta": {"title": "T"}}\n```'
    assert parse_generated_copy(text) == {"sections": [], "meta": {"title": "T"}}


@pytest.mark.parametrize("text", ["", "no braces here", "{not: valid}", None])
def test_parse_generated_copy_failures(text) -> None:
    with pytest.raises(GenerationFailure):
        parse_generated_copy(text)
