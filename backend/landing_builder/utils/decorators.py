from functools import wraps
from flask import g, jsonify
from landing_builder.extensions import db
from landing_builder.models.project import Project

def project_owner_required(fn):
    """
    Loads the <project_id> route argument into g.current_project and
    rejects callers who do not own it.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        user_id = getattr(g, "current_user_id", None)
        if not user_id:
            return jsonify({"error": "Authentication required"}), 401

        project = db.session.get(Project, kwargs.get("project_id"))
        if project is None:
            return jsonify({"error": "Project not found"}), 404

        if project.user_id != user_id:
            return jsonify({"error": "Not your project"}), 403

        g.current_project = project
        return fn(*args, **kwargs)
    return wrapper
