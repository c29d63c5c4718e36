from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable, Optional

from sqlalchemy.exc import SQLAlchemyError

from fleet_profile.application.errors import DataIntegrityError, ForbiddenError, NotFoundError, StoreError
from fleet_profile.domain.access_keys import HQ_FC_KEY, TRAINEE_KEY, UnknownRoleError, get_access_keys
from fleet_profile.domain.account import AuthenticatedAccount
from fleet_profile.domain.fleet_time import merge_time_by_hull, rank_fleet_time, time_by_hull
from fleet_profile.domain.profile import Character, CharacterDetails, ProfileData
from fleet_profile.infrastructure.persistence.admin_repo import get_admin_role
from fleet_profile.infrastructure.persistence.badge_repo import list_badge_names
from fleet_profile.infrastructure.persistence.character_repo import get_character, list_linked_characters
from fleet_profile.infrastructure.persistence.fleet_activity_repo import list_fleet_sessions
from fleet_profile.infrastructure.sde.type_names import UnknownTypeError
from fleet_profile.infrastructure.session_provider import SessionProvider, StateSessionProvider

logger = logging.getLogger(__name__)


def check_profile_access(account: AuthenticatedAccount, character_id: int) -> None:
    if int(character_id) == int(account.id):
        return
    if not account.has_access(HQ_FC_KEY):
        raise ForbiddenError("You must be an HQ FC to access this endpoint")


def resolve_character_group(session: Any, character_id: int) -> list[Character]:
    """Return the requested character followed by its linked alts, alts ordered by name."""
    target = get_character(session, character_id)
    if target is None:
        raise NotFoundError(f"Character {character_id} not found")

    group = [target]
    seen = {target.id}
    for alt in list_linked_characters(session, character_id):
        if alt.id in seen:
            continue
        seen.add(alt.id)
        group.append(alt)
    return group


def resolve_role(
    session: Any,
    character_id: int,
    access_keys: Callable[[str], frozenset[str]] = get_access_keys,
) -> Optional[str]:
    role = get_admin_role(session, character_id)
    if role is None:
        return None

    try:
        keys = access_keys(role)
    except UnknownRoleError as e:
        raise DataIntegrityError(f"Character {character_id} has an unrecognised admin role: {e}") from e

    if HQ_FC_KEY in keys:
        return "HQ-FC"
    if TRAINEE_KEY in keys:
        return "TRAINEE"
    return None


class ProfileService:
    def __init__(
        self,
        *,
        state: Any,
        sessions: SessionProvider | None = None,
        access_keys: Callable[[str], frozenset[str]] = get_access_keys,
    ):
        self._state = state
        self._sessions = sessions or StateSessionProvider(state=state)
        self._access_keys = access_keys

    def _hull_name(self, sde_session: Any, hull_id: int) -> str:
        type_names = getattr(self._state, "type_names", None)
        if type_names is None:
            raise RuntimeError("Type name resolver not initialized")
        try:
            return type_names.name_of(sde_session, hull_id)
        except UnknownTypeError as e:
            raise DataIntegrityError(f"Fleet activity references an unknown hull: {e}") from e
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to resolve hull {hull_id}") from e

    def get_profile(self, account: AuthenticatedAccount, character_id: int) -> ProfileData:
        """Build the fleet profile for `character_id` and every character linked to it.

        The access check runs before anything is read. Any failure aborts the
        whole request; partial profiles are never returned.
        """
        check_profile_access(account, character_id)

        session = self._sessions.app_session()
        try:
            characters = resolve_character_group(session, character_id)

            details: list[tuple[Character, Optional[str], list[str], dict[int, int]]] = []
            for c in characters:
                role = resolve_role(session, c.id, self._access_keys)
                badges = list_badge_names(session, c.id)
                hull_totals = time_by_hull(list_fleet_sessions(session, c.id))
                details.append((c, role, badges, hull_totals))
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to read profile data for character {character_id}") from e
        finally:
            session.close()

        account_totals: dict[int, int] = {}
        main: Optional[CharacterDetails] = None
        alts: list[CharacterDetails] = []
        sde_session = self._sessions.sde_session()
        try:
            hull_name = partial(self._hull_name, sde_session)
            for c, role, badges, hull_totals in details:
                merge_time_by_hull(account_totals, hull_totals)
                entry = CharacterDetails(
                    id=c.id,
                    name=c.name,
                    role=role,
                    badges=badges,
                    fleet_time=rank_fleet_time(hull_totals, hull_name),
                )
                if c.id == int(character_id):
                    main = entry
                else:
                    alts.append(entry)
            total_fleet_time = rank_fleet_time(account_totals, hull_name)
        finally:
            sde_session.close()

        if main is None:
            raise RuntimeError(f"Character group for {character_id} does not contain the requested character")

        logger.debug(
            "Built profile for %s: %d alt(s), %d hull(s)", character_id, len(alts), len(account_totals)
        )
        return ProfileData(
            main=main,
            alts=alts,
            total_fleet_time=total_fleet_time,
        )
