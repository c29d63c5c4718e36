from __future__ import annotations

import logging

from flask import Blueprint

from flask_app.auth import current_account
from flask_app.bootstrap import require_ready
from flask_app.deps import get_profile_service
from flask_app.http import ok


profile_bp = Blueprint("profile", __name__)


@profile_bp.get("/api/profile/<int:character_id>")
def profile(character_id: int):
    """Fleet profile for a character and its alts.

    Failures are rendered by the app-level ServiceError handler.
    """
    require_ready()
    account = current_account()
    logging.debug("Profile %s requested by %s", character_id, account.id)
    data = get_profile_service().get_profile(account, character_id)
    return ok(data=data.to_dict())
