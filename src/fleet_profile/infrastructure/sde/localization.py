from __future__ import annotations

import json
from typing import Any


def parse_localized(raw: Any, language: str) -> str:
    """Pick one language out of an SDE localized name.

    SDE names are stored as JSON objects (``{"en": "Megathron", "de": ...}``);
    falls back to the first available language, then to the raw value.
    """
    if raw is None:
        return ""

    if isinstance(raw, dict):
        text = raw.get(language) or next(iter(raw.values()), "")
    elif isinstance(raw, str):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            data = raw
        if isinstance(data, dict):
            text = data.get(language) or next(iter(data.values()), "")
        else:
            text = raw
    else:
        text = str(raw)

    return str(text).strip()
