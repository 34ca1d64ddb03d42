# landing_builder/repositories/project_store.py
"""
Persistence collaborator for the landing page builder.

A project's landing page state is exposed as a plain record:
{"id", "document", "published", "slug"}. Any storage failure is raised as
PersistenceError so callers never see driver exceptions. Updates are
flushed, not committed: the caller owns the transaction, so an audit row
staged alongside commits or rolls back with the change.
"""
from typing import Any, Dict, Mapping, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from landing_builder.domain.errors import PersistenceError
from landing_builder.extensions import db
from landing_builder.models.project import Project

# record field -> Project column
RECORD_COLUMNS = {
    "document": "landing_page",
    "published": "landing_page_published",
    "slug": "landing_page_slug",
}


class ProjectStore(Protocol):
    def get_project_record(self, project_id: str) -> Optional[Dict[str, Any]]:
        ...

    def update_project_record(self, project_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
        ...

    def find_published_record_by_slug(
        self, slug: str, exclude_project_id: Optional[str] = None
    ) -> Optional[Dict[str, Any]]:
        ...


class SqlProjectStore:
    """ProjectStore backed by the `projects` table."""

    def get_project_record(self, project_id: str) -> Optional[Dict[str, Any]]:
        try:
            project = db.session.get(Project, project_id)
        except SQLAlchemyError as exc:
            raise PersistenceError("Could not load the landing page.") from exc
        return project.to_record() if project else None

    def update_project_record(self, project_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
        unknown = set(fields) - set(RECORD_COLUMNS)
        if unknown:
            raise ValueError(f"Unknown landing page fields: {sorted(unknown)}")

        try:
            project = db.session.get(Project, project_id)
            if project is None:
                raise PersistenceError("Project not found.")

            for field, value in fields.items():
                setattr(project, RECORD_COLUMNS[field], value)
            db.session.flush()
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise PersistenceError("Could not save the landing page.") from exc

        return project.to_record()

    def find_published_record_by_slug(
        self, slug: str, exclude_project_id: Optional[str] = None
    ) -> Optional[Dict[str, Any]]:
        query = select(Project).where(
            Project.landing_page_slug == slug,
            Project.landing_page_published.is_(True),
        )
        if exclude_project_id is not None:
            query = query.where(Project.id != exclude_project_id)

        try:
            project = db.session.execute(query.limit(1)).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise PersistenceError("Could not check slug availability.") from exc
        return project.to_record() if project else None
