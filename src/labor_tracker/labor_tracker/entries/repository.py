from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Protocol, Sequence

from .model import DailyEntryRecord


class EntryRepository(Protocol):
    def insert_many(self, rows: Sequence[Dict[str, Any]]) -> None:
        """Insert a whole batch in one call."""
        raise NotImplementedError

    def list_between(
        self,
        *,
        start_date: date,
        end_date: date,
        site_id: Optional[str] = None,
    ) -> Sequence[DailyEntryRecord]:
        """Entries with start_date <= entry_date <= end_date, optionally for one site."""
        raise NotImplementedError
