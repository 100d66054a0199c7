from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..entries.model import DailyEntryRecord


@dataclass
class CategorySubtotal:
    name: str
    workers: int = 0
    cost: float = 0.0


@dataclass
class DailyReport:
    """Derived per-day summary; rebuilt on every fetch, never stored."""

    date: str
    total_workers: int = 0
    total_cost: float = 0.0
    entries: List[DailyEntryRecord] = field(default_factory=list)
    categories: List[CategorySubtotal] = field(default_factory=list)
