from flask import Flask, send_file, current_app
from .config import config_by_name
from .extensions import db, migrate
from .api.v1 import v1_bp
from .api.public import public_bp
from .middleware.user_middleware import user_middleware
from .errors import register_error_handlers
import os


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)

    # Models must be imported before migrations / create_all see the metadata
    from .models import project, audit_log, landing_page_view, landing_page_signup  # noqa: F401

    # -------------------------------------------------
    # Middleware
    # -------------------------------------------------
    user_middleware(app)

    # -------------------------------------------------
    # Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    app.register_blueprint(public_bp)
    register_error_handlers(app)

    # -------------------------------------------------
    # Serve OpenAPI YAML
    # -------------------------------------------------
    @app.route("/openapi/landing.yaml", methods=["GET"], endpoint="openapi_landing")
    def serve_openapi():
        spec_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "landing_openapi.yaml",
        )

        if not os.path.exists(spec_path):
            raise FileNotFoundError("landing_openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    return app
