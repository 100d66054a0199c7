from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..database.connection import SupabaseConnection
from ..database.supabase_base import as_float, as_optional_float, execute
from .model import DailyEntryRecord
from .repository import EntryRepository


def _to_record(row: Dict[str, Any]) -> DailyEntryRecord:
    total = row.get("total_cost")
    return DailyEntryRecord(
        entry_date=str(row["entry_date"]),
        site_id=str(row.get("site_id") or ""),
        category=row.get("category") or "",
        rate=as_float(row.get("rate")),
        normal_hours=as_float(row.get("normal_hours")),
        overtime_hours=as_float(row.get("overtime_hours")),
        num_workers=int(row.get("num_workers") or 0),
        supervisor_id=row.get("supervisor_id"),
        supervisor_email=row.get("supervisor_email"),
        total_cost=float(total) if total is not None else None,
        overtime_multiplier=as_optional_float(row.get("overtime_multiplier")),
    )


class SupabaseEntryRepository(EntryRepository):
    def __init__(self, conn_factory: SupabaseConnection):
        self._conn_factory = conn_factory
        self._table = conn_factory.config.entries_table

    def insert_many(self, rows: Sequence[Dict[str, Any]]) -> None:
        execute(self._conn_factory.connect().table(self._table).insert(list(rows)), what="insert daily entries")

    def list_between(
        self,
        *,
        start_date: date,
        end_date: date,
        site_id: Optional[str] = None,
    ) -> Sequence[DailyEntryRecord]:
        query = (
            self._conn_factory.connect()
            .table(self._table)
            .select("*")
            .gte("entry_date", start_date.isoformat())
            .lte("entry_date", end_date.isoformat())
        )
        if site_id:
            query = query.eq("site_id", site_id)
        rows = execute(query, what="fetch daily entries")
        return [_to_record(r) for r in rows]
