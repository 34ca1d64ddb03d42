from flask import current_app
from landing_builder.domain.slug import public_url

def normalize_landing_page(project):
    data = {
        "project_id": project.id,
        "document": project.landing_page,
        "published": bool(project.landing_page_published),
        "slug": project.landing_page_slug,
        "url": None,
        "updated_at": project.updated_at.isoformat() if project.updated_at else None,
    }

    if project.landing_page_slug:
        data["url"] = public_url(
            current_app.config["PUBLIC_BASE_URL"],
            project.landing_page_slug,
        )

    return data
