from __future__ import annotations

import logging
import os


def _env(name: str, default: str) -> str:
    value = os.getenv(name)
    return default if value is None or value == "" else value


def configure_logging(
    *,
    default_level: str = "INFO",
    fmt: str = "%(asctime)s %(levelname)s %(name)s: %(message)s",
    datefmt: str = "%Y-%m-%d %H:%M:%S",
    force: bool = True,
) -> None:
    """Configure stdlib logging once for the API process.

    Environment variables:
    - LOG_LEVEL: overrides default_level (e.g. DEBUG, INFO)
    - LOG_FORCE: when set to 0/false, keeps an existing configuration
    - SQL_ECHO: when truthy, logs every SQL statement at INFO
    """

    level_name = _env("LOG_LEVEL", default_level).upper()
    level = getattr(logging, level_name, logging.INFO)

    env_force = _env("LOG_FORCE", "1").lower() not in {"0", "false", "no"}

    logging.basicConfig(level=level, format=fmt, datefmt=datefmt, force=(force and env_force))

    # Werkzeug request lines follow the app level.
    logging.getLogger("werkzeug").setLevel(level)

    sql_echo = _env("SQL_ECHO", "0").lower() in {"1", "true", "yes", "on"}
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if sql_echo else logging.WARNING)
