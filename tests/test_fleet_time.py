from __future__ import annotations

from dataclasses import dataclass

import pytest

from fleet_profile.application.errors import DataIntegrityError
from fleet_profile.domain.fleet_time import merge_time_by_hull, rank_fleet_time, time_by_hull


@dataclass
class _Session:
    character_id: int
    hull: int
    first_seen: int
    last_seen: int


def _names(hull_id: int) -> str:
    return {587: "Rifter", 641: "Megathron", 17740: "Vindicator"}[hull_id]


def test_time_by_hull_sums_sessions_per_hull() -> None:
    sessions = [
        _Session(1, 587, 0, 100),
        _Session(1, 641, 1000, 1600),
        _Session(1, 587, 5000, 5050),
    ]

    assert time_by_hull(sessions) == {587: 150, 641: 600}


def test_time_by_hull_keeps_zero_length_sessions() -> None:
    assert time_by_hull([_Session(1, 587, 42, 42)]) == {587: 0}


def test_time_by_hull_rejects_negative_duration() -> None:
    with pytest.raises(DataIntegrityError) as exc:
        time_by_hull([_Session(7, 587, 100, 99)])

    assert exc.value.status_code == 500
    assert "character 7" in exc.value.message


def test_account_total_is_sum_over_characters() -> None:
    account: dict[int, int] = {}
    merge_time_by_hull(account, time_by_hull([_Session(1, 587, 0, 100), _Session(1, 587, 200, 250)]))
    merge_time_by_hull(account, time_by_hull([_Session(2, 587, 0, 30)]))

    assert account == {587: 180}


def test_rank_fleet_time_orders_longest_first() -> None:
    ranked = rank_fleet_time({587: 10, 641: 300, 17740: 20}, _names)

    assert [e.hull.id for e in ranked] == [641, 17740, 587]
    assert [e.hull.name for e in ranked] == ["Megathron", "Vindicator", "Rifter"]
    assert all(a.time_in_fleet >= b.time_in_fleet for a, b in zip(ranked, ranked[1:]))


def test_rank_fleet_time_ties_keep_insertion_order() -> None:
    ranked = rank_fleet_time({641: 60, 587: 60}, _names)

    assert [e.hull.id for e in ranked] == [641, 587]


def test_rank_fleet_time_propagates_unknown_hull() -> None:
    with pytest.raises(KeyError):
        rank_fleet_time({587: 10, 99999: 5}, _names)


def test_rank_fleet_time_empty() -> None:
    assert rank_fleet_time({}, _names) == []
