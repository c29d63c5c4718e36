from __future__ import annotations

from typing import Optional

from fleet_profile.db_models import AdminModel


def get_admin_role(session, character_id: int) -> Optional[str]:
    row = session.query(AdminModel.role).filter(AdminModel.character_id == character_id).one_or_none()
    return row.role if row is not None else None
