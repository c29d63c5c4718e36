from __future__ import annotations

import logging
from typing import Optional

from flask import g, has_app_context

from flask_app.deps import get_state

_SESSION_KEYS = ("_db_app_session", "_db_sde_session")


class _RequestSession:
    """Proxy that keeps the request-scoped session open until app-context teardown."""

    def __init__(self, session):
        self._session = session

    def close(self) -> None:
        # Closed by close_request_sessions().
        pass

    def __getattr__(self, name):
        return getattr(self._session, name)


def _get_or_create_session(g_key: str, session_factory):
    session = getattr(g, g_key, None)
    if session is None:
        session = session_factory()
        setattr(g, g_key, session)
    return _RequestSession(session)


def get_db_app_session():
    s = get_state()
    if s.db_app is None:
        raise RuntimeError("App DB not initialized")
    if not has_app_context():
        return s.db_app.Session()
    return _get_or_create_session("_db_app_session", s.db_app.Session)


def get_db_sde_session():
    s = get_state()
    if s.db_sde is None:
        raise RuntimeError("SDE DB not initialized")
    if not has_app_context():
        return s.db_sde.Session()
    return _get_or_create_session("_db_sde_session", s.db_sde.Session)


def close_request_sessions(exc: Optional[BaseException] = None) -> None:
    for key in _SESSION_KEYS:
        session = g.pop(key, None)
        if session is None:
            continue
        try:
            session.close()
        except Exception:
            # Must not mask the exception that ended the request.
            logging.warning("Failed to close %s", key, exc_info=True)
