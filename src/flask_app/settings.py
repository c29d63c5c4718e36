from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os


def _env(name: str, default: str) -> str:
    value = os.getenv(name)
    return default if value is None or value == "" else value


def _bool(name: str, default: bool) -> bool:
    raw = _env(name, "1" if default else "0").strip().lower()
    return raw in {"1", "true", "yes", "y", "on"}


def _int(name: str, default: int) -> int:
    raw = _env(name, str(default)).strip()
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class FlaskSettings:
    flask_host: str
    flask_port: int
    flask_debug: bool
    app_db_uri: str
    sde_db_uri: str
    language: str
    secret_key: str
    token_cookie_name: str


@lru_cache(maxsize=1)
def get_settings() -> FlaskSettings:
    return FlaskSettings(
        flask_host=_env("FLASK_HOST", "localhost"),
        flask_port=_int("FLASK_PORT", default=5000),
        flask_debug=_bool("FLASK_DEBUG", default=False),
        app_db_uri=_env("FLEET_PROFILE_APP_DB_URI", "sqlite:///database/fleet_app.db"),
        sde_db_uri=_env("FLEET_PROFILE_SDE_DB_URI", "sqlite:///database/eve_sde.db"),
        language=_env("FLEET_PROFILE_LANGUAGE", "en"),
        secret_key=_env("FLEET_PROFILE_SECRET_KEY", "insecure-development-key-change-me-in-prod"),
        token_cookie_name=_env("FLEET_PROFILE_TOKEN_COOKIE", "token"),
    )


def flask_host() -> str:
    return get_settings().flask_host


def flask_port() -> int:
    return get_settings().flask_port


def flask_debug() -> bool:
    return get_settings().flask_debug


def app_db_uri() -> str:
    return get_settings().app_db_uri


def sde_db_uri() -> str:
    return get_settings().sde_db_uri


def language() -> str:
    # Language used when picking hull names out of localized SDE strings.
    return get_settings().language


def secret_key() -> str:
    # HS256 key for session tokens; must match the issuer.
    return get_settings().secret_key


def token_cookie_name() -> str:
    return get_settings().token_cookie_name
