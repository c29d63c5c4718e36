from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import threading


@dataclass
class AppState:
    # Lifecycle
    init_state: str = "Not Started"
    init_error: Optional[str] = None
    init_lock: threading.Lock = field(default_factory=threading.Lock)

    # Runtime collaborators
    db_app: Any = None
    db_sde: Any = None
    type_names: Any = None

    @property
    def ready(self) -> bool:
        return self.init_state == "Ready"


state = AppState()
