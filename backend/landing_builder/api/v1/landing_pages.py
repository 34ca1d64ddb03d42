# landing_builder/api/v1/landing_pages.py
from flask import current_app, g, jsonify, request
from landing_builder.application.landing.generate_landing_page import generate_landing_page
from landing_builder.application.landing.landing_page_analytics import landing_page_analytics
from landing_builder.application.landing.publish_controller import PublishController
from landing_builder.domain.document import Document
from landing_builder.domain.sections import list_types
from landing_builder.domain.templates import COLOR_PRESETS, FONTS, GRADIENTS, list_templates
from landing_builder.errors import PUBLISH_ERROR_STATUS
from landing_builder.normalizers.landing_page import normalize_landing_page
from landing_builder.repositories.project_store import SqlProjectStore
from landing_builder.services.copy_generator import CopyGenerator
from landing_builder.utils.audit import log_action
from landing_builder.utils.decorators import project_owner_required
from landing_builder.utils.optimistic_lock import enforce_optimistic_lock
from landing_builder.utils.transaction import transactional
from . import v1_bp


def _controller(project_id):
    return PublishController(SqlProjectStore(), project_id)


def _run_audited(project_id, call, *, action, payload=None):
    """
    Runs a controller call and its audit row in one transaction. Calls that
    left the record unchanged are not audited.
    """
    with transactional():
        result = call(_controller(project_id))
        if result.ok and result.changed:
            log_action(
                action=action,
                entity_type="project",
                entity_id=project_id,
                actor_id=g.current_user_id,
                payload={"state": result.state, "slug": result.slug, **(payload or {})},
            )

    if not result.ok:
        return jsonify(result.to_dict()), PUBLISH_ERROR_STATUS.get(result.error, 400)
    return jsonify(result.to_dict()), 200


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _document_from_body(data):
    if "document" not in data:
        return None
    return Document.from_dict(data["document"])


# ------------------------
# Catalog
# ------------------------

@v1_bp.route("/landing-pages/section-types", methods=["GET"])
def section_types():
    return jsonify(list_types())


@v1_bp.route("/landing-pages/templates", methods=["GET"])
def templates():
    return jsonify({
        "templates": list_templates(),
        "fonts": FONTS,
        "color_presets": COLOR_PRESETS,
        "gradients": GRADIENTS,
    })


# ------------------------
# Project landing page
# ------------------------

@v1_bp.route("/projects/<project_id>/landing-page", methods=["GET"])
@project_owner_required
def get_landing_page(project_id):
    project = g.current_project
    response = jsonify(normalize_landing_page(project))
    if project.updated_at is not None:
        response.last_modified = project.updated_at
    return response


@v1_bp.route("/projects/<project_id>/landing-page/generate", methods=["POST"])
@project_owner_required
def generate(project_id):
    project = g.current_project
    data = _json_body()

    document = generate_landing_page(
        generator=CopyGenerator.from_config(current_app.config),
        project_name=project.name,
        project_pain=project.pain_description,
        target_audience=project.target_audience,
        template=data.get("template", "startup"),
    )

    return jsonify({"document": document.to_dict()}), 200


@v1_bp.route("/projects/<project_id>/landing-page", methods=["PUT"])
@project_owner_required
def save(project_id):
    # -----------------------
    # Optimistic Locking Check
    # -----------------------
    enforce_optimistic_lock(g.current_project)

    data = _json_body()
    document = _document_from_body(data)
    if document is None:
        return jsonify({"error": "Document is required"}), 400

    return _run_audited(
        project_id,
        lambda controller: controller.save(document),
        action="landing_page.save",
        payload={"sections": len(document)},
    )


@v1_bp.route("/projects/<project_id>/landing-page/publish", methods=["POST"])
@project_owner_required
def publish(project_id):
    data = _json_body()
    slug = data.get("slug")

    document = _document_from_body(data)
    if document is None:
        stored = g.current_project.landing_page
        if stored is None:
            return jsonify({"error": "Nothing to publish yet"}), 400
        document = Document.from_dict(stored)

    return _run_audited(
        project_id,
        lambda controller: controller.publish(slug, document),
        action="landing_page.publish",
    )


@v1_bp.route("/projects/<project_id>/landing-page/unpublish", methods=["POST"])
@project_owner_required
def unpublish(project_id):
    return _run_audited(
        project_id,
        lambda controller: controller.unpublish(),
        action="landing_page.unpublish",
    )


@v1_bp.route("/projects/<project_id>/landing-page/analytics", methods=["GET"])
@project_owner_required
def analytics(project_id):
    return jsonify(landing_page_analytics(project_id=project_id)), 200
