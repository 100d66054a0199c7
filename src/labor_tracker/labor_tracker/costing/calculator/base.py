from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class CostCalculator(ABC):
    """Calculator interface (Strategy Pattern for labor cost)."""

    @abstractmethod
    def total_cost(
        self,
        *,
        rate: float,
        normal_hours: float,
        overtime_hours: float,
        worker_count: float,
        overtime_multiplier: Optional[float] = None,
    ) -> float:
        raise NotImplementedError
