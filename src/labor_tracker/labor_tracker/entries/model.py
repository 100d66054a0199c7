from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class DraftEntry:
    """One line of the daily entry form, kept in the session until saved."""

    draft_id: str
    category: str
    normal_hours: float
    overtime_hours: float
    worker_count: int
    rate: float
    overtime_multiplier: float
    total_cost: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DraftEntry":
        return cls(
            draft_id=str(data["draft_id"]),
            category=str(data["category"]),
            normal_hours=float(data["normal_hours"]),
            overtime_hours=float(data["overtime_hours"]),
            worker_count=int(data["worker_count"]),
            rate=float(data["rate"]),
            overtime_multiplier=float(data["overtime_multiplier"]),
            total_cost=float(data["total_cost"]),
        )


@dataclass(frozen=True)
class DailyEntryRecord:
    """Read-model of a row in daily_entries (immutable once posted)."""

    entry_date: str
    site_id: str
    category: str
    rate: float
    normal_hours: float
    overtime_hours: float
    num_workers: int
    supervisor_id: Optional[str] = None
    supervisor_email: Optional[str] = None
    total_cost: Optional[float] = None
    overtime_multiplier: Optional[float] = None
