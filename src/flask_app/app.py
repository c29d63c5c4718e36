from __future__ import annotations

import logging

from flask import Flask

from werkzeug.exceptions import HTTPException

from flask_app.db import close_request_sessions
from flask_app.http import error, internal_error
from flask_app.state import AppState, state

from fleet_profile.application.errors import ServiceError

from flask_app.routes.admin import admin_bp
from flask_app.routes.profile import profile_bp


def create_app(app_state: AppState | None = None) -> Flask:
    app = Flask(__name__)

    # Expose state via the Flask app instance so routes don't need to import the
    # module-level global directly.
    app.extensions["app_state"] = app_state or state

    # Ensure DB sessions created during a request are always closed.
    app.teardown_appcontext(close_request_sessions)

    @app.errorhandler(HTTPException)
    def _handle_http_exception(e: HTTPException):
        return error(message=e.description, status_code=e.code or 500)

    @app.errorhandler(ServiceError)
    def _handle_service_error(e: ServiceError):
        if e.is_internal:
            logging.exception("Internal service error: %s", e.message)
            return internal_error()
        return error(message=e.message, status_code=e.status_code)

    @app.errorhandler(RuntimeError)
    def _handle_runtime_error(e: RuntimeError):
        msg = str(e)
        if msg.startswith("Application not ready:"):
            return error(message=msg, status_code=503)
        logging.exception("Unhandled RuntimeError")
        return internal_error()

    @app.errorhandler(Exception)
    def _handle_unhandled_exception(e: Exception):
        logging.exception("Unhandled exception")
        return internal_error()

    # Blueprints
    app.register_blueprint(admin_bp)
    app.register_blueprint(profile_bp)

    return app
