from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class Character:
    id: int
    name: str
    corporation_id: Optional[int] = None


@dataclass(frozen=True)
class Hull:
    id: int
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class ActivitySummaryEntry:
    hull: Hull
    time_in_fleet: int

    def to_dict(self) -> dict[str, Any]:
        return {"hull": self.hull.to_dict(), "time_in_fleet": self.time_in_fleet}


@dataclass(frozen=True)
class CharacterDetails:
    id: int
    name: str
    role: Optional[str] = None
    badges: list[str] = field(default_factory=list)
    fleet_time: list[ActivitySummaryEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "role": self.role,
            "badges": list(self.badges),
            "fleet_time": [e.to_dict() for e in self.fleet_time],
        }


@dataclass(frozen=True)
class ProfileData:
    main: CharacterDetails
    alts: list[CharacterDetails]
    total_fleet_time: list[ActivitySummaryEntry]

    def to_dict(self) -> dict[str, Any]:
        return {
            "main": self.main.to_dict(),
            "alts": [a.to_dict() for a in self.alts],
            "total_fleet_time": [e.to_dict() for e in self.total_fleet_time],
        }
