# landing_builder/application/landing/unpublish_landing_page.py
from typing import Any, Dict, Optional
from landing_builder.domain.errors import PersistenceError
from landing_builder.domain.lifecycle.landing_page import (
    DRAFT,
    PUBLISHED,
    next_landing_page_state,
    state_of,
)
from landing_builder.repositories.project_store import ProjectStore


def unpublish_landing_page(
    *,
    store: ProjectStore,
    project_id: str,
) -> Optional[Dict[str, Any]]:
    """
    Takes the landing page offline.

    The slug and document are kept so a later publish reuses the same slug.
    Returns the updated record, or None when the page was already a draft
    and nothing was written.
    """
    record = store.get_project_record(project_id)
    if record is None:
        raise PersistenceError("Project not found.")

    current = state_of(record["published"])
    if current == DRAFT:
        return None

    next_state = next_landing_page_state(from_state=current, action="unpublish")
    return store.update_project_record(project_id, {"published": next_state == PUBLISHED})
