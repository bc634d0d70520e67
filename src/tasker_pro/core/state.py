# src/tasker_pro/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (real Settings or a test SimpleNamespace).
    settings: Any

    task_store: TaskRepo

    # Who is acting. Established outside the core (console /login).
    current_user_id: str | None = None

    # Connectors serialize command handling on this.
    lock: threading.RLock = field(default_factory=threading.RLock)
