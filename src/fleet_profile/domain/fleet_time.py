"""Time-in-fleet aggregation by hull.

Sessions are treated as independent, non-overlapping intervals. Totals are
plain ``{hull_id: seconds}`` maps until they are ranked for output.
"""

from __future__ import annotations

from typing import Callable, Iterable, Mapping, Protocol

from fleet_profile.application.errors import DataIntegrityError
from fleet_profile.domain.profile import ActivitySummaryEntry, Hull


class FleetSession(Protocol):
    character_id: int
    hull: int
    first_seen: int
    last_seen: int


def session_duration(session: FleetSession) -> int:
    duration = int(session.last_seen) - int(session.first_seen)
    if duration < 0:
        raise DataIntegrityError(
            f"Fleet session for character {session.character_id} ends before it starts "
            f"(first_seen={session.first_seen}, last_seen={session.last_seen})"
        )
    return duration


def time_by_hull(sessions: Iterable[FleetSession]) -> dict[int, int]:
    totals: dict[int, int] = {}
    for s in sessions:
        hull = int(s.hull)
        totals[hull] = totals.get(hull, 0) + session_duration(s)
    return totals


def merge_time_by_hull(into: dict[int, int], partial: Mapping[int, int]) -> dict[int, int]:
    """Add one character's hull totals into the account-wide accumulator (in place)."""
    for hull, seconds in partial.items():
        into[hull] = into.get(hull, 0) + seconds
    return into


def rank_fleet_time(totals: Mapping[int, int], name_of: Callable[[int], str]) -> list[ActivitySummaryEntry]:
    """Resolve hull names and sort by time in fleet, longest first.

    ``name_of`` must raise for unknown hulls; nothing is skipped. The sort is
    stable so equal totals keep the map's insertion order.
    """
    entries = [
        ActivitySummaryEntry(hull=Hull(id=hull, name=name_of(hull)), time_in_fleet=seconds)
        for hull, seconds in totals.items()
    ]
    entries.sort(key=lambda e: e.time_in_fleet, reverse=True)
    return entries
