from __future__ import annotations

import logging

from flask_app.deps import get_state
from flask_app.state import AppState
from flask_app.settings import app_db_uri, language, sde_db_uri

from fleet_profile.db_models import BaseApp
from fleet_profile.infrastructure.database_manager import DatabaseManager
from fleet_profile.infrastructure.sde.type_names import TypeNameResolver


def initialize_application(app_state: AppState | None = None, *, create_tables: bool = False) -> None:
    """Open the databases and wire up the type-name resolver.

    `create_tables` creates missing app tables; the SDE is never modified.
    """
    state = app_state or get_state()
    with state.init_lock:
        if state.ready:
            return
        try:
            logging.info("Initializing databases...")
            state.init_state = "Initializing Databases"
            state.db_app = DatabaseManager(app_db_uri(), language())
            state.db_sde = DatabaseManager(sde_db_uri(), language())
            if create_tables:
                state.db_app.create_all(BaseApp.metadata)

            state.init_state = "Initializing Static Data"
            state.type_names = TypeNameResolver(language=state.db_sde.language)

            state.init_state = "Ready"
            state.init_error = None
            logging.info("Initialization complete (app=%s, sde=%s)", state.db_app.get_db_name(), state.db_sde.get_db_name())
        except Exception as e:
            state.init_state = "Error"
            state.init_error = str(e)
            logging.exception("Initialization failed")
            raise


def require_ready() -> None:
    s = get_state()
    if not s.ready:
        raise RuntimeError(f"Application not ready: {s.init_state}")
