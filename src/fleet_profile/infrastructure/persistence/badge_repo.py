from __future__ import annotations

from fleet_profile.db_models import BadgeAssignmentModel, BadgeModel


def list_badge_names(session, character_id: int) -> list[str]:
    rows = (
        session.query(BadgeModel.name)
        .join(BadgeAssignmentModel, BadgeAssignmentModel.BadgeId == BadgeModel.id)
        .filter(BadgeAssignmentModel.CharacterId == character_id)
        .all()
    )
    return [str(r.name) for r in rows]
