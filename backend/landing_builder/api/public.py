from flask import Blueprint, jsonify, request
from landing_builder.application.landing.capture_signup import capture_signup
from landing_builder.application.landing.record_page_view import record_page_view
from landing_builder.domain.signups import build_referrer
from landing_builder.repositories.project_store import SqlProjectStore

public_bp = Blueprint("public", __name__)


def _published_or_404(slug):
    record = SqlProjectStore().find_published_record_by_slug(slug)
    if record is None:
        return None, (jsonify({"error": "Page not found"}), 404)
    return record, None


@public_bp.route("/p/<slug>", methods=["GET"])
def view_landing_page(slug):
    """
    Published landing page for anonymous viewers. Each request is recorded
    as a view; `ref` is stored with it and handed back for the signup form.
    """
    record, not_found = _published_or_404(slug)
    if not_found:
        return not_found

    ref = request.args.get("ref")
    record_page_view(
        project_id=record["id"],
        referrer=build_referrer(ref, request.referrer),
        user_agent=request.headers.get("User-Agent"),
    )

    return jsonify({
        "slug": record["slug"],
        "document": record["document"],
        "ref": ref,
    })


@public_bp.route("/p/<slug>/signup", methods=["POST"])
def signup(slug):
    record, not_found = _published_or_404(slug)
    if not_found:
        return not_found

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    result = capture_signup(
        project_id=record["id"],
        email=data.get("email"),
        ref=data.get("ref") or request.args.get("ref"),
        referrer=data.get("referrer") or request.referrer,
    )

    if result["created"]:
        return jsonify({"status": "subscribed"}), 201
    return jsonify({"status": "already_subscribed"}), 200
