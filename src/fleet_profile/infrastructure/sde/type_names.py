from __future__ import annotations

import logging
import threading
from typing import Any

from fleet_profile.db_models import Types
from fleet_profile.infrastructure.sde.localization import parse_localized

logger = logging.getLogger(__name__)


class UnknownTypeError(LookupError):
    def __init__(self, type_id: int):
        super().__init__(type_id)
        self.type_id = type_id

    def __str__(self) -> str:
        return f"Unknown type id: {self.type_id}"


class TypeNameResolver:
    """Resolve EVE type ids (hulls) to display names from the SDE ``types`` table.

    The SDE is static, so resolved names are kept for the lifetime of the
    resolver. Lookups run on the caller's SDE session; unknown ids are not
    cached.
    """

    def __init__(self, *, language: str = "en"):
        self._language = language
        self._names: dict[int, str] = {}
        self._lock = threading.Lock()

    def name_of(self, session: Any, type_id: int) -> str:
        type_id = int(type_id)
        with self._lock:
            cached = self._names.get(type_id)
        if cached is not None:
            return cached

        row = session.query(Types).filter(Types.id == type_id).one_or_none()
        if row is None:
            raise UnknownTypeError(type_id)

        name = parse_localized(row.name, self._language) or str(type_id)
        with self._lock:
            self._names[type_id] = name
        logger.debug("Resolved type %s -> %s", type_id, name)
        return name
