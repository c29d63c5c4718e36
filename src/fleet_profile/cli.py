from __future__ import annotations

import argparse
import logging

from flask_app.app import create_app
from flask_app.bootstrap import initialize_application
from flask_app.settings import flask_debug, flask_host, flask_port
from utils.logging_setup import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fleet-profile",
        description="Runs the fleet profile API (per-account fleet time, roles and badges).",
    )

    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: %(default)s)",
    )

    parser.add_argument(
        "--init-db",
        action="store_true",
        help="Create missing app database tables before serving.",
    )

    parser.add_argument(
        "--host",
        default=None,
        help="Bind address (default: FLASK_HOST or localhost).",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Bind port (default: FLASK_PORT or 5000).",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    # LOG_LEVEL from the environment still wins over --log-level.
    configure_logging(default_level=args.log_level)

    app = create_app()
    initialize_application(app.extensions.get("app_state"), create_tables=args.init_db)

    host = args.host or flask_host()
    port = args.port or flask_port()
    logging.info("Serving fleet profile API on http://%s:%s", host, port)

    # Avoid Werkzeug reloader to prevent double-starting.
    app.run(host=host, port=port, debug=flask_debug(), use_reloader=False)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
