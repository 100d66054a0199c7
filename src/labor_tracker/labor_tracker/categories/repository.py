from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import WorkerCategory


class CategoryRepository(Protocol):
    """Repository interface for WorkerCategory.

    Services depend on this interface, never on a concrete backend.
    """

    def list_all(self, *, active_only: bool = False) -> Sequence[WorkerCategory]:
        """All categories ordered by name."""
        raise NotImplementedError

    def get_by_id(self, category_id: str) -> Optional[WorkerCategory]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        short_code: str,
        hourly_rate: float,
        overtime_multiplier: float,
        is_active: bool = True,
    ) -> None:
        raise NotImplementedError

    def update(self, category_id: str, updates: Mapping[str, Any]) -> None:
        """Partial update of a single row."""
        raise NotImplementedError
