from __future__ import annotations

from functools import lru_cache
from typing import Optional

HQ_FC_KEY = "waitlist-tag:HQ-FC"
TRAINEE_KEY = "waitlist-tag:TRAINEE"

# role -> (parent role, keys added on top of the parent)
ACCESS_LEVELS: dict[str, tuple[Optional[str], tuple[str, ...]]] = {
    "user": (None, ()),
    "trainee": (
        "user",
        (
            TRAINEE_KEY,
            "fleet-view",
            "pilot-view",
            "waitlist-view",
        ),
    ),
    "fc": (
        "user",
        (
            "fleet-view",
            "pilot-view",
            "waitlist-view",
            "fleet-configure",
            "fleet-invite",
            "fleet-activity-view",
            "waitlist-manage",
            "search",
        ),
    ),
    "hq-fc": (
        "fc",
        (
            HQ_FC_KEY,
            "fleet-history-view",
            "skill-history-view",
            "bans-manage",
        ),
    ),
    "instructor": (
        "hq-fc",
        (
            "badges-manage",
            "notes-view",
            "notes-add",
        ),
    ),
    "leadership": (
        "instructor",
        (
            "access-view",
            "access-manage",
            "stats-view",
        ),
    ),
    "council": (
        "leadership",
        (
            "access-manage:all",
            "waitlist-edit",
        ),
    ),
    "admin": (
        "council",
        (
            "access-manage:admin",
        ),
    ),
}


class UnknownRoleError(KeyError):
    def __init__(self, role: str):
        super().__init__(role)
        self.role = role

    def __str__(self) -> str:
        return f"Unknown role: {self.role!r}"


@lru_cache(maxsize=None)
def get_access_keys(role: str) -> frozenset[str]:
    """Expand a stored role name into every access key it grants, inherited ones included."""
    if role not in ACCESS_LEVELS:
        raise UnknownRoleError(role)

    parent, keys = ACCESS_LEVELS[role]
    inherited = get_access_keys(parent) if parent is not None else frozenset()
    return inherited | frozenset(keys)
