from __future__ import annotations

import logging
import os

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


class DatabaseManager:
    def __init__(self, db_uri: str, language: str = "en", *, echo: bool = False):
        self.db_uri = db_uri
        self.language = language

        engine_kwargs = dict(echo=echo, future=True)

        # In-memory SQLite is per-connection; share one connection across threads.
        if self.db_uri in ("sqlite://", "sqlite:///:memory:", "sqlite+pysqlite:///:memory:"):
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}

        self.engine = create_engine(self.db_uri, **engine_kwargs)
        self.Session = sessionmaker(bind=self.engine)

    def create_all(self, metadata) -> None:
        """Create any missing tables for the given declarative metadata."""
        self._ensure_sqlite_dir()
        metadata.create_all(self.engine)
        logging.info("Ensured tables on %s", self.get_db_name())

    def get_db_name(self) -> str:
        """Return the database filename from the URI. Example: 'sqlite:///database/fleet_app.db' -> 'fleet_app.db'"""
        path = self.db_uri
        if path.startswith("sqlite:///"):
            path = path[10:]
        return os.path.basename(path) or path

    def _ensure_sqlite_dir(self) -> None:
        if not self.db_uri.startswith("sqlite:///"):
            return
        path = self.db_uri[len("sqlite:///"):]
        if not path or path == ":memory:":
            return
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

    def dispose(self) -> None:
        self.engine.dispose()
