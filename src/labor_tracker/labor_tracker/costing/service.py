from __future__ import annotations

from typing import Optional

from ..core.constants import STANDARD_DAY_HOURS
from .calculator.standard_calculator import StandardCostCalculator

_standard = StandardCostCalculator()


def labor_cost(
    rate: float,
    normal_hours: float,
    overtime_hours: float,
    worker_count: float,
    overtime_multiplier: Optional[float] = None,
) -> float:
    """Plain-function form of the standard cost rule."""
    return _standard.total_cost(
        rate=rate,
        normal_hours=normal_hours,
        overtime_hours=overtime_hours,
        worker_count=worker_count,
        overtime_multiplier=overtime_multiplier,
    )


def daily_rate(hourly_rate: float, hours: float = STANDARD_DAY_HOURS) -> float:
    return hourly_rate * hours
