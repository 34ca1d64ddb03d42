from flask import request, g

def user_middleware(app):
    @app.before_request
    def load_user():
        # Set by the auth gateway in front of this service.
        g.current_user_id = request.headers.get("X-User-ID") or None
