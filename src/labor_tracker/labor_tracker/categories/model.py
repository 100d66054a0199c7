from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_OVERTIME_MULTIPLIER
from ..costing.service import daily_rate


@dataclass(frozen=True)
class WorkerCategory:
    """Reference data: a kind of worker and what an hour of them costs."""

    category_id: str
    name: str
    short_code: str
    hourly_rate: float
    overtime_multiplier: float = DEFAULT_OVERTIME_MULTIPLIER
    is_active: bool = True

    @property
    def label(self) -> str:
        return f"{self.name} ({self.short_code})"

    @property
    def daily_rate(self) -> float:
        return daily_rate(self.hourly_rate)
