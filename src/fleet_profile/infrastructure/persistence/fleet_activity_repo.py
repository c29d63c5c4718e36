from __future__ import annotations

from fleet_profile.db_models import FleetActivityModel


def list_fleet_sessions(session, character_id: int) -> list[FleetActivityModel]:
    # Newest first, matching the fleet history views.
    return (
        session.query(FleetActivityModel)
        .filter(FleetActivityModel.character_id == character_id)
        .order_by(FleetActivityModel.first_seen.desc())
        .all()
    )
