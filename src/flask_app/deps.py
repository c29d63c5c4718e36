from __future__ import annotations

from typing import cast

from flask import current_app

from flask_app.state import AppState, state as default_state

from fleet_profile.application.profile.service import ProfileService


def get_state() -> AppState:
    """Return the AppState for the current Flask app.

    Falls back to the module-level state outside an app context (CLI, startup).
    """

    try:
        app = current_app._get_current_object()
    except RuntimeError:
        return default_state

    return cast(AppState, app.extensions.get("app_state", default_state))


def get_profile_service() -> ProfileService:
    # Imported here: session_provider imports flask_app.db, which imports this module.
    from flask_app.session_provider import FlaskSessionProvider

    return ProfileService(state=get_state(), sessions=FlaskSessionProvider())
