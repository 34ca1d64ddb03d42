from landing_builder.extensions import db
from .base import BaseModel

class Project(BaseModel):
    __tablename__ = "projects"

    user_id = db.Column(db.String(36), nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    pain_description = db.Column(db.Text, nullable=True)
    target_audience = db.Column(db.Text, nullable=True)

    # Landing page builder state (PublishRecord)
    landing_page = db.Column(db.JSON(none_as_null=True), nullable=True)
    landing_page_published = db.Column(db.Boolean, nullable=False, default=False, index=True)
    # Not unique: slug availability is checked by the publish
    # controller (check-then-act), not by the database.
    landing_page_slug = db.Column(db.String(200), nullable=True, index=True)

    __table_args__ = (
        db.Index("ix_projects_slug_published", "landing_page_slug", "landing_page_published"),
    )

    def to_record(self):
        return {
            "id": self.id,
            "document": self.landing_page,
            "published": bool(self.landing_page_published),
            "slug": self.landing_page_slug,
        }
