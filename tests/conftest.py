from __future__ import annotations

import json
from typing import Any

import pytest

from fleet_profile.db_models import (
    AdminModel,
    AltCharacterModel,
    BadgeAssignmentModel,
    BadgeModel,
    BaseApp,
    BaseSde,
    CharacterModel,
    FleetActivityModel,
    Types,
)
from fleet_profile.infrastructure.database_manager import DatabaseManager
from fleet_profile.infrastructure.sde.type_names import TypeNameResolver

MEMORY_URI = "sqlite+pysqlite:///:memory:"

# Synthetic SDE rows; ids match real hulls but only the names matter.
HULL_NAMES = {
    587: "Rifter",
    641: "Megathron",
    17740: "Vindicator",
    24694: "Maelstrom",
}


class _FakeState:
    def __init__(self, *, db_app: DatabaseManager, db_sde: DatabaseManager):
        self.db_app = db_app
        self.db_sde = db_sde
        self.type_names = TypeNameResolver(language="en")


@pytest.fixture
def app_db() -> DatabaseManager:
    db = DatabaseManager(MEMORY_URI)
    db.create_all(BaseApp.metadata)
    yield db
    db.dispose()


@pytest.fixture
def sde_db() -> DatabaseManager:
    db = DatabaseManager(MEMORY_URI)
    db.create_all(BaseSde.metadata)
    session = db.Session()
    for type_id, name in HULL_NAMES.items():
        session.add(Types(id=type_id, groupID=25, name=json.dumps({"en": name, "de": name}), published=True))
    session.commit()
    session.close()
    yield db
    db.dispose()


@pytest.fixture
def fake_state(app_db: DatabaseManager, sde_db: DatabaseManager) -> _FakeState:
    return _FakeState(db_app=app_db, db_sde=sde_db)


def add_character(session, character_id: int, name: str, *, corporation_id: int | None = 98000001) -> None:
    session.add(CharacterModel(id=int(character_id), name=name, corporation_id=corporation_id))


def link_alt(session, account_id: int, alt_id: int) -> None:
    session.add(AltCharacterModel(account_id=int(account_id), alt_id=int(alt_id)))


def set_role(session, character_id: int, role: str) -> None:
    session.add(AdminModel(character_id=int(character_id), role=role))


def grant_badge(session, character_id: int, badge_name: str) -> None:
    badge = session.query(BadgeModel).filter(BadgeModel.name == badge_name).one_or_none()
    if badge is None:
        badge = BadgeModel(name=badge_name)
        session.add(badge)
        session.flush()
    session.add(BadgeAssignmentModel(CharacterId=int(character_id), BadgeId=badge.id))


def add_session(session, character_id: int, hull: int, first_seen: int, last_seen: int, **extra: Any) -> None:
    session.add(
        FleetActivityModel(
            character_id=int(character_id),
            hull=int(hull),
            first_seen=int(first_seen),
            last_seen=int(last_seen),
            **extra,
        )
    )
