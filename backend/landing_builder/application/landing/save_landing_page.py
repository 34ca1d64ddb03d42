# landing_builder/application/landing/save_landing_page.py
from typing import Any, Dict
from landing_builder.domain.document import Document
from landing_builder.domain.errors import PersistenceError
from landing_builder.domain.invariants.document import assert_document
from landing_builder.repositories.project_store import ProjectStore


def save_landing_page(
    *,
    store: ProjectStore,
    project_id: str,
    document: Document,
) -> Dict[str, Any]:
    """
    Persists the document as the project's draft.

    `published` and `slug` are left exactly as stored.
    """

    # 1️⃣ Load current record
    record = store.get_project_record(project_id)
    if record is None:
        raise PersistenceError("Project not found.")

    # 2️⃣ Invariants
    assert_document(document)

    # 3️⃣ Write document only
    return store.update_project_record(project_id, {"document": document.to_dict()})
