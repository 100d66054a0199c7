from __future__ import annotations

from enum import Enum


class ActionState(str, Enum):
    """Lifecycle of one user action: idle -> pending -> idle | error."""

    IDLE = "IDLE"
    PENDING = "PENDING"
    ERROR = "ERROR"


class Action(str, Enum):
    """User-initiated actions that talk to the backend."""

    SAVE_DAILY = "save_daily"
    FETCH_REPORT = "fetch_report"
    SAVE_CATEGORY = "save_category"
