from __future__ import annotations

from dataclasses import dataclass, field

from fleet_profile.application.errors import ForbiddenError


@dataclass(frozen=True)
class AuthenticatedAccount:
    id: int
    access: frozenset[str] = field(default_factory=frozenset)

    def has_access(self, key: str) -> bool:
        return key in self.access

    def require_access(self, key: str) -> None:
        if key not in self.access:
            raise ForbiddenError(f"Missing access: {key}")
