from __future__ import annotations

import json

import pytest

from fleet_profile.db_models import Types
from fleet_profile.infrastructure.sde.localization import parse_localized
from fleet_profile.infrastructure.sde.type_names import TypeNameResolver, UnknownTypeError


@pytest.fixture
def sde_session(sde_db):
    session = sde_db.Session()
    yield session
    session.close()


def test_name_of_known_hull(sde_session) -> None:
    resolver = TypeNameResolver(language="en")

    assert resolver.name_of(sde_session, 587) == "Rifter"
    assert resolver.name_of(sde_session, 17740) == "Vindicator"


def test_name_of_unknown_hull(sde_session) -> None:
    resolver = TypeNameResolver(language="en")

    with pytest.raises(UnknownTypeError) as exc:
        resolver.name_of(sde_session, 31337)

    assert exc.value.type_id == 31337


def test_name_of_caches_static_names(sde_db, sde_session) -> None:
    resolver = TypeNameResolver(language="en")
    assert resolver.name_of(sde_session, 641) == "Megathron"

    writer = sde_db.Session()
    writer.query(Types).filter(Types.id == 641).update({Types.name: json.dumps({"en": "Renamed"})})
    writer.commit()
    writer.close()

    assert resolver.name_of(sde_session, 641) == "Megathron"


def test_cached_name_needs_no_query(sde_session) -> None:
    resolver = TypeNameResolver(language="en")
    resolver.name_of(sde_session, 587)

    class _NoQuery:
        def query(self, *args, **kwargs):
            raise AssertionError("cached name must not hit the SDE")

    assert resolver.name_of(_NoQuery(), 587) == "Rifter"


def test_name_of_falls_back_to_other_language(sde_db, sde_session) -> None:
    writer = sde_db.Session()
    writer.add(Types(id=1, groupID=25, name=json.dumps({"de": "Nur Deutsch"}), published=True))
    writer.commit()
    writer.close()

    resolver = TypeNameResolver(language="en")

    assert resolver.name_of(sde_session, 1) == "Nur Deutsch"


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, ""),
        ('{"en": "Rifter", "fr": "Rifter FR"}', "Rifter"),
        ({"en": "Megathron"}, "Megathron"),
        ("Plain Name", "Plain Name"),
        (587, "587"),
    ],
)
def test_parse_localized(raw, expected: str) -> None:
    assert parse_localized(raw, "en") == expected
