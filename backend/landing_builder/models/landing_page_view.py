from landing_builder.extensions import db
from .base import BaseModel


class PageView(BaseModel):
    __tablename__ = "landing_page_views"

    __table_args__ = (
        db.Index("ix_landing_page_views_project_created", "project_id", "created_at"),
    )

    project_id = db.Column(db.String(36), db.ForeignKey("projects.id"), nullable=False, index=True)
    referrer = db.Column(db.Text, nullable=True)
    user_agent = db.Column(db.Text, nullable=True)
