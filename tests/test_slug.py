"""Tests for slug validation and public URL helpers."""

from __future__ import annotations

import pytest

from landing_builder.domain.errors import InvalidSlug
from landing_builder.domain.slug import clean_slug_input, public_path, public_url, validate_slug


@pytest.mark.parametrize("slug", ["my-slug", "a", "launch-2025", "---"])
def test_valid_slugs(slug: str) -> None:
    assert validate_slug(slug) == slug


@pytest.mark.parametrize("slug", ["My Slug!", "", "Caps", "space here", "ünï", "a/b", "trailing\n", 7])
def test_invalid_slugs(slug) -> None:
    with pytest.raises(InvalidSlug):
        validate_slug(slug)


def test_clean_slug_input_mirrors_editor_field() -> None:
    assert clean_slug_input("My Slug!") == "myslug"
    assert clean_slug_input("Churn-Radar 2") == "churn-radar2"
    assert clean_slug_input(None) == ""


def test_public_url_passes_ref_through() -> None:
    assert public_path("launch") == "/p/launch"
    assert public_url("https://app.example.com/", "launch", ref="tw-123") == (
        "https://app.example.com/p/launch?ref=tw-123"
    )
