"""Tests for slug publication through the publish controller.

Uses ``InMemoryProjectStore`` from conftest. The last test demonstrates
the accepted check-then-act race: two projects publishing the same slug
at the same time can both succeed.
"""

from __future__ import annotations

import pytest

from landing_builder.application.landing.publish_controller import PublishController
from landing_builder.domain.document import Document
from landing_builder.domain.lifecycle.landing_page import DRAFT, PUBLISHED, next_landing_page_state


def test_republishing_own_slug_is_idempotent(store, startup_doc: Document) -> None:
    controller = PublishController(store, "project-a")

    first = controller.publish("my-slug", startup_doc)
    second = controller.publish("my-slug", startup_doc)

    assert first.ok and second.ok
    assert second.state == "published"
    assert store.records["project-a"]["slug"] == "my-slug"
    assert store.records["project-a"]["document"] == startup_doc.to_dict()


def test_other_project_cannot_take_published_slug(store, startup_doc: Document) -> None:
    PublishController(store, "project-a").publish("my-slug", startup_doc)

    result = PublishController(store, "project-b").publish("my-slug", Document())

    assert not result.ok
    assert result.error == "SlugTaken"
    assert result.message
    assert store.records["project-b"]["published"] is False


def test_invalid_slug_is_rejected(store, startup_doc: Document) -> None:
    for slug in ("My Slug!", "", "UPPER", "under_score", None):
        result = PublishController(store, "project-a").publish(slug, startup_doc)
        assert result.error == "InvalidSlug", slug
    assert store.records["project-a"]["published"] is False


def test_unpublish_keeps_slug_and_document(store, startup_doc: Document) -> None:
    controller = PublishController(store, "project-a")
    controller.publish("launch", startup_doc)

    result = controller.unpublish()

    assert result.ok
    assert result.state == "draft"
    record = store.records["project-a"]
    assert record["published"] is False
    assert record["slug"] == "launch"
    assert record["document"] == startup_doc.to_dict()


def test_unpublished_slug_is_free_for_others(store, startup_doc: Document) -> None:
    PublishController(store, "project-a").publish("launch", startup_doc)
    PublishController(store, "project-a").unpublish()

    assert PublishController(store, "project-b").publish("launch", startup_doc).ok


def test_unpublish_draft_changes_nothing(store) -> None:
    result = PublishController(store, "project-a").unpublish()
    assert result.ok
    assert result.state == "draft"
    assert result.changed is False
    assert store.writes == []


def test_writes_report_a_change(store, startup_doc: Document) -> None:
    controller = PublishController(store, "project-a")
    assert controller.publish("launch", startup_doc).changed is True
    assert controller.save(startup_doc).changed is True
    assert controller.unpublish().changed is True
    assert [fields.get("published") for _, fields in store.writes] == [True, None, False]


def test_failures_report_no_change(store, startup_doc: Document) -> None:
    assert PublishController(store, "project-a").publish("Bad!", startup_doc).changed is False


def test_landing_page_transitions() -> None:
    assert next_landing_page_state(from_state=DRAFT, action="publish") == PUBLISHED
    assert next_landing_page_state(from_state=PUBLISHED, action="publish") == PUBLISHED
    assert next_landing_page_state(from_state=PUBLISHED, action="unpublish") == DRAFT
    with pytest.raises(ValueError):
        next_landing_page_state(from_state=DRAFT, action="unpublish")


def test_save_does_not_touch_publish_state(store, startup_doc: Document) -> None:
    controller = PublishController(store, "project-a")
    controller.publish("launch", Document())

    result = controller.save(startup_doc)

    assert result.ok
    assert result.state == "published"
    record = store.records["project-a"]
    assert record["published"] is True
    assert record["slug"] == "launch"
    assert record["document"] == startup_doc.to_dict()


def test_persistence_failure_is_returned_not_raised(store, startup_doc: Document) -> None:
    store.failing = True
    controller = PublishController(store, "project-a")

    for result in (controller.publish("ok-slug", startup_doc), controller.save(startup_doc), controller.unpublish()):
        assert not result.ok
        assert result.error == "PersistenceError"


def test_unknown_project_is_a_persistence_error(store, startup_doc: Document) -> None:
    result = PublishController(store, "nope").publish("slug", startup_doc)
    assert result.error == "PersistenceError"


def test_result_to_dict(store, startup_doc: Document) -> None:
    controller = PublishController(store, "project-a")
    assert controller.publish("launch", startup_doc).to_dict() == {"state": "published", "slug": "launch"}
    assert controller.publish("Bad!", startup_doc).to_dict()["error"] == "InvalidSlug"


def test_concurrent_publish_of_same_slug_can_both_succeed(store, startup_doc: Document) -> None:
    """
    Availability check and write are separate calls. If project B publishes
    between project A's check and A's write, both end up published under
    the same slug.
    """
    results = []
    original_find = store.find_published_record_by_slug

    def find_then_interleave(slug, exclude_project_id=None):
        found = original_find(slug, exclude_project_id)
        if exclude_project_id == "project-a":
            store.find_published_record_by_slug = original_find
            results.append(PublishController(store, "project-b").publish(slug, startup_doc))
        return found

    store.find_published_record_by_slug = find_then_interleave
    results.append(PublishController(store, "project-a").publish("launch", startup_doc))

    assert all(r.ok for r in results)
    holders = [r["id"] for r in store.records.values() if r["slug"] == "launch" and r["published"]]
    assert sorted(holders) == ["project-a", "project-b"]
