# landing_builder/application/landing/generate_landing_page.py
import logging
from typing import Optional
from landing_builder.domain.document import Document
from landing_builder.domain.errors import GenerationFailure
from landing_builder.domain.generation import build_document
from landing_builder.domain.sections import IdFactory

logger = logging.getLogger(__name__)


def generate_landing_page(
    *,
    generator,
    project_name: str,
    project_pain: Optional[str],
    target_audience: Optional[str],
    template: str,
    id_factory: Optional[IdFactory] = None,
) -> Document:
    """
    Seeds a new document from a template and AI-written copy.

    Generation failures are absorbed: the result is then the template's
    placeholder document with the project name as page title.
    """
    try:
        payload = generator.generate_copy(project_name, project_pain, target_audience, template)
    except GenerationFailure as exc:
        logger.warning("Falling back to template defaults for %r: %s", template, exc)
        payload = None

    return build_document(
        template,
        payload,
        id_factory=id_factory,
        meta_defaults={
            "title": project_name or "",
            "description": project_pain or "",
        },
    )
