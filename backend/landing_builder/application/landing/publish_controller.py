# landing_builder/application/landing/publish_controller.py
from dataclasses import dataclass
from typing import Any, Dict, Optional

from landing_builder.application.landing.publish_landing_page import publish_landing_page
from landing_builder.application.landing.save_landing_page import save_landing_page
from landing_builder.application.landing.unpublish_landing_page import unpublish_landing_page
from landing_builder.domain.document import Document
from landing_builder.domain.errors import PersistenceError, PublishError
from landing_builder.domain.lifecycle.landing_page import state_of
from landing_builder.repositories.project_store import ProjectStore


@dataclass(frozen=True)
class PublishResult:
    """
    Outcome of a publish controller call.

    Failures carry an error code (InvalidSlug, SlugTaken, PersistenceError)
    and a message fit for display; they are never raised to the caller.
    `changed` is False when the call left the stored record as it was.
    """

    ok: bool
    state: Optional[str] = None
    slug: Optional[str] = None
    error: Optional[str] = None
    message: Optional[str] = None
    changed: bool = False

    @classmethod
    def success(cls, record: Dict[str, Any], changed: bool = True) -> "PublishResult":
        return cls(
            ok=True,
            state=state_of(record["published"]),
            slug=record.get("slug"),
            changed=changed,
        )

    @classmethod
    def failure(cls, exc: PublishError) -> "PublishResult":
        return cls(ok=False, error=exc.code, message=exc.message)

    def to_dict(self) -> Dict[str, Any]:
        if self.ok:
            return {"state": self.state, "slug": self.slug}
        return {"error": self.error, "message": self.message}


class PublishController:
    """Draft/published transitions for one project's landing page."""

    def __init__(self, store: ProjectStore, project_id: str):
        self.store = store
        self.project_id = project_id

    def publish(self, slug: str, document: Document) -> PublishResult:
        return self._run(
            publish_landing_page,
            slug=slug,
            document=document,
        )

    def unpublish(self) -> PublishResult:
        return self._run(unpublish_landing_page)

    def save(self, document: Document) -> PublishResult:
        return self._run(save_landing_page, document=document)

    def _run(self, use_case, **kwargs) -> PublishResult:
        try:
            record = use_case(store=self.store, project_id=self.project_id, **kwargs)
            if record is None:
                return PublishResult.success(self._current_record(), changed=False)
        except PublishError as exc:
            return PublishResult.failure(exc)
        return PublishResult.success(record)

    def _current_record(self) -> Dict[str, Any]:
        record = self.store.get_project_record(self.project_id)
        if record is None:
            raise PersistenceError("Project not found.")
        return record
