"""Shared fixtures for the landing builder test suite.

Provides a Flask app bound to an in-memory SQLite database, a test client,
a project factory, deterministic section ids, and ``InMemoryProjectStore``,
a dictionary-backed stand-in for the persistence collaborator used by the
publish controller tests.
"""

from __future__ import annotations

import typing as typ

import pytest

from landing_builder import create_app
from landing_builder.domain.document import Document
from landing_builder.domain.errors import PersistenceError
from landing_builder.domain.generation import build_document
from landing_builder.domain.sections import SequentialIds
from landing_builder.extensions import db
from landing_builder.models.project import Project


class InMemoryProjectStore:
    """Dictionary-backed persistence collaborator."""

    def __init__(self) -> None:
        self.records: dict[str, dict[str, typ.Any]] = {}
        self.failing = False
        self.writes: list[tuple[str, dict[str, typ.Any]]] = []

    def add(self, project_id: str, **fields: typ.Any) -> None:
        record = {"id": project_id, "document": None, "published": False, "slug": None}
        record.update(fields)
        self.records[project_id] = record

    def _check(self) -> None:
        if self.failing:
            raise PersistenceError("Database unavailable.")

    def get_project_record(self, project_id: str) -> dict[str, typ.Any] | None:
        self._check()
        record = self.records.get(project_id)
        return dict(record) if record else None

    def update_project_record(
        self, project_id: str, fields: typ.Mapping[str, typ.Any]
    ) -> dict[str, typ.Any]:
        self._check()
        if project_id not in self.records:
            raise PersistenceError("Project not found.")
        self.writes.append((project_id, dict(fields)))
        self.records[project_id].update(fields)
        return dict(self.records[project_id])

    def find_published_record_by_slug(
        self, slug: str, exclude_project_id: str | None = None
    ) -> dict[str, typ.Any] | None:
        self._check()
        for record in self.records.values():
            if record["id"] == exclude_project_id:
                continue
            if record["slug"] == slug and record["published"]:
                return dict(record)
        return None


@pytest.fixture
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture
def startup_doc(ids: SequentialIds) -> Document:
    """Five-section startup document with ids hero-1 .. footer-5."""
    return build_document("startup", id_factory=ids)


@pytest.fixture
def store() -> InMemoryProjectStore:
    memory = InMemoryProjectStore()
    memory.add("project-a")
    memory.add("project-b")
    return memory


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_project(app):
    def _make(user_id: str = "user-1", name: str = "Churn Radar", **fields: typ.Any) -> Project:
        project = Project()
        project.user_id = user_id
        project.name = name
        project.pain_description = fields.pop("pain_description", "Customers churn silently")
        project.target_audience = fields.pop("target_audience", "SaaS founders")
        for key, value in fields.items():
            setattr(project, key, value)
        db.session.add(project)
        db.session.commit()
        return project

    return _make
