from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence

from ..core.constants import DEFAULT_OVERTIME_MULTIPLIER
from ..database.connection import SupabaseConnection
from ..database.supabase_base import as_float, execute
from .model import WorkerCategory
from .repository import CategoryRepository


def _to_category(row: Dict[str, Any]) -> WorkerCategory:
    return WorkerCategory(
        category_id=str(row["id"]),
        name=row["name"],
        short_code=row.get("short_code") or "",
        hourly_rate=as_float(row.get("hourly_rate")),
        overtime_multiplier=as_float(row.get("overtime_multiplier"), DEFAULT_OVERTIME_MULTIPLIER),
        is_active=bool(row.get("is_active", True)),
    )


class SupabaseCategoryRepository(CategoryRepository):
    def __init__(self, conn_factory: SupabaseConnection):
        self._conn_factory = conn_factory
        self._table = conn_factory.config.categories_table

    def list_all(self, *, active_only: bool = False) -> Sequence[WorkerCategory]:
        query = self._conn_factory.connect().table(self._table).select("*")
        if active_only:
            query = query.eq("is_active", True)
        rows = execute(query.order("name"), what="fetch categories")
        return [_to_category(r) for r in rows]

    def get_by_id(self, category_id: str) -> Optional[WorkerCategory]:
        query = self._conn_factory.connect().table(self._table).select("*").eq("id", category_id).limit(1)
        rows = execute(query, what="fetch category")
        return _to_category(rows[0]) if rows else None

    def create(
        self,
        *,
        name: str,
        short_code: str,
        hourly_rate: float,
        overtime_multiplier: float,
        is_active: bool = True,
    ) -> None:
        row = {
            "name": name,
            "short_code": short_code,
            "hourly_rate": hourly_rate,
            "overtime_multiplier": overtime_multiplier,
            "is_active": is_active,
        }
        execute(self._conn_factory.connect().table(self._table).insert([row]), what="insert category")

    def update(self, category_id: str, updates: Mapping[str, Any]) -> None:
        query = self._conn_factory.connect().table(self._table).update(dict(updates)).eq("id", category_id)
        execute(query, what="update category")
