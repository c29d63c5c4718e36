from __future__ import annotations

from flask import Blueprint, jsonify

from flask_app.deps import get_state


admin_bp = Blueprint("admin", __name__)


@admin_bp.get("/health")
def health_check():
    s = get_state()
    if not s.ready:
        payload = {"status": "not_ready", "init_state": s.init_state}
        if s.init_error:
            payload["error"] = s.init_error
        return jsonify(payload), 503
    return jsonify({"status": "OK"}), 200
