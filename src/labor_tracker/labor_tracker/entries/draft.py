from __future__ import annotations

import uuid
from typing import Any, Dict, Iterable, List, Optional

from ..auth.model import AuthUser
from .model import DraftEntry


class DraftSession:
    """Line items collected on the daily entry form before one batch save.

    Lives in the HTTP session as a list of plain dicts.
    """

    def __init__(self, entries: Optional[Iterable[DraftEntry]] = None):
        self._entries: List[DraftEntry] = list(entries or [])

    @classmethod
    def from_session(cls, raw: Optional[List[Dict[str, Any]]]) -> "DraftSession":
        return cls(DraftEntry.from_dict(d) for d in (raw or []))

    def to_session(self) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self._entries]

    @property
    def entries(self) -> List[DraftEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def append(
        self,
        *,
        category: str,
        normal_hours: float,
        overtime_hours: float,
        worker_count: int,
        rate: float,
        overtime_multiplier: float,
        total_cost: float,
    ) -> DraftEntry:
        entry = DraftEntry(
            draft_id=uuid.uuid4().hex,
            category=category,
            normal_hours=normal_hours,
            overtime_hours=overtime_hours,
            worker_count=worker_count,
            rate=rate,
            overtime_multiplier=overtime_multiplier,
            total_cost=total_cost,
        )
        self._entries.append(entry)
        return entry

    def remove(self, draft_id: str) -> None:
        self._entries = [e for e in self._entries if e.draft_id != draft_id]

    def clear(self) -> None:
        self._entries = []

    @property
    def total_workers(self) -> int:
        return sum(e.worker_count for e in self._entries)

    @property
    def total_cost(self) -> float:
        return sum(e.total_cost for e in self._entries)

    def to_rows(self, *, entry_date: str, site_id: str, user: AuthUser) -> List[Dict[str, Any]]:
        return [
            {
                "entry_date": entry_date,
                "site_id": site_id,
                "supervisor_id": user.user_id,
                "supervisor_email": user.email,
                "category": e.category,
                "rate": e.rate,
                "normal_hours": e.normal_hours,
                "overtime_hours": e.overtime_hours,
                "num_workers": e.worker_count,
                "total_cost": e.total_cost,
                "overtime_multiplier": e.overtime_multiplier,
            }
            for e in self._entries
        ]
