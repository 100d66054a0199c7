from __future__ import annotations

from typing import Optional

from ...core.constants import DEFAULT_OVERTIME_MULTIPLIER
from ...core.exceptions import ValidationError
from .base import CostCalculator


class StandardCostCalculator(CostCalculator):
    """Standard rule: rate*normal*workers + rate*overtime*multiplier*workers.

    No rounding here; callers round for display/export only.
    """

    def __init__(self, default_multiplier: float = DEFAULT_OVERTIME_MULTIPLIER):
        self._default_multiplier = float(default_multiplier)

    def total_cost(
        self,
        *,
        rate: float,
        normal_hours: float,
        overtime_hours: float,
        worker_count: float,
        overtime_multiplier: Optional[float] = None,
    ) -> float:
        multiplier = self._default_multiplier if overtime_multiplier is None else overtime_multiplier

        for name, value in (
            ("Rate", rate),
            ("Normal hours", normal_hours),
            ("Overtime hours", overtime_hours),
            ("Worker count", worker_count),
            ("Overtime multiplier", multiplier),
        ):
            if value < 0:
                raise ValidationError(f"{name} cannot be negative")

        normal_cost = rate * normal_hours * worker_count
        overtime_cost = rate * overtime_hours * multiplier * worker_count
        return normal_cost + overtime_cost
