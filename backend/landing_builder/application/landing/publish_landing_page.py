# landing_builder/application/landing/publish_landing_page.py
from typing import Any, Dict
from landing_builder.domain.document import Document
from landing_builder.domain.errors import PersistenceError, SlugTaken
from landing_builder.domain.invariants.document import assert_document
from landing_builder.domain.lifecycle.landing_page import PUBLISHED, next_landing_page_state, state_of
from landing_builder.domain.slug import validate_slug
from landing_builder.repositories.project_store import ProjectStore


def publish_landing_page(
    *,
    store: ProjectStore,
    project_id: str,
    slug: str,
    document: Document,
) -> Dict[str, Any]:
    """
    Publishes the document under `slug`.

    Responsibilities:
    - slug validation
    - global slug availability (other projects only)
    - lifecycle enforcement
    - writing document, published flag and slug together

    The availability check and the write are two separate store calls.
    Two projects publishing the same slug concurrently can both pass the
    check; nothing here prevents that.
    """

    # 1️⃣ Validate slug
    validate_slug(slug)

    # 2️⃣ Load current record
    record = store.get_project_record(project_id)
    if record is None:
        raise PersistenceError("Project not found.")

    next_state = next_landing_page_state(from_state=state_of(record["published"]), action="publish")
    assert_document(document)

    # 3️⃣ Slug availability across all projects
    if store.find_published_record_by_slug(slug, exclude_project_id=project_id):
        raise SlugTaken("This URL is already taken. Please choose another.")

    # 4️⃣ Commit document + state
    return store.update_project_record(project_id, {
        "document": document.to_dict(),
        "published": next_state == PUBLISHED,
        "slug": slug,
    })
