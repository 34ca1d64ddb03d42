from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from landing_builder.domain.errors import PublishError
from landing_builder.domain.invariants.exceptions import InvariantViolation

PUBLISH_ERROR_STATUS = {
    "InvalidSlug": 400,
    "SlugTaken": 409,
    "PersistenceError": 503,
}

def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        response = jsonify({
            "error": type(error).__name__,
            "message": str(error)
        })
        response.status_code = 400
        return response

    @app.errorhandler(PublishError)
    def handle_publish_error(error):
        response = jsonify({
            "error": error.code,
            "message": error.message
        })
        response.status_code = PUBLISH_ERROR_STATUS.get(error.code, 400)
        return response

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(error):
        app.logger.error("Database error: %s", error)
        response = jsonify({
            "error": "PersistenceError",
            "message": "The change could not be saved. Please try again."
        })
        response.status_code = PUBLISH_ERROR_STATUS["PersistenceError"]
        return response
