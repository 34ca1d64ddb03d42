from landing_builder.extensions import db
from .base import BaseModel


class Signup(BaseModel):
    __tablename__ = "landing_page_signups"

    __table_args__ = (
        db.UniqueConstraint("project_id", "email", name="uq_signup_project_email"),
    )

    project_id = db.Column(db.String(36), db.ForeignKey("projects.id"), nullable=False, index=True)
    email = db.Column(db.String(254), nullable=False)
    referrer = db.Column(db.Text, nullable=True)
    source = db.Column(db.String(50), nullable=False, default="landing_page")

    def to_dict(self):
        return {
            "id": self.id,
            "email": self.email,
            "referrer": self.referrer,
            "source": self.source,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
