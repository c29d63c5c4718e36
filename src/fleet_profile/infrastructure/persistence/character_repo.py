from __future__ import annotations

from typing import Optional

from sqlalchemy import or_

from fleet_profile.db_models import AltCharacterModel, CharacterModel
from fleet_profile.domain.profile import Character


def _to_character(row: CharacterModel) -> Character:
    return Character(id=int(row.id), name=row.name, corporation_id=row.corporation_id)


def get_character(session, character_id: int) -> Optional[Character]:
    row = session.query(CharacterModel).filter(CharacterModel.id == character_id).one_or_none()
    return _to_character(row) if row is not None else None


def list_linked_characters(session, character_id: int) -> list[Character]:
    """Characters sharing an alt link with `character_id` (one hop), ordered by name.

    One row is returned per matching link, so double-linked pairs show up twice.
    """
    rows = (
        session.query(CharacterModel)
        .join(
            AltCharacterModel,
            or_(AltCharacterModel.alt_id == CharacterModel.id, AltCharacterModel.account_id == CharacterModel.id),
        )
        .filter(
            or_(AltCharacterModel.alt_id == character_id, AltCharacterModel.account_id == character_id),
            CharacterModel.id != character_id,
        )
        .order_by(CharacterModel.name.asc(), CharacterModel.id.asc())
        .all()
    )
    return [_to_character(r) for r in rows]
