from __future__ import annotations

from typing import Any

from fleet_profile.infrastructure.session_provider import SessionProvider
from flask_app.db import get_db_app_session, get_db_sde_session


class FlaskSessionProvider(SessionProvider):
    """SessionProvider handing out the request's shared sessions.

    Sessions stay open for the whole request and are closed via
    `app.teardown_appcontext(close_request_sessions)`.
    """

    def app_session(self) -> Any:
        return get_db_app_session()

    def sde_session(self) -> Any:
        return get_db_sde_session()
