import pytest

from labor_tracker.core.exceptions import ValidationError
from labor_tracker.costing.calculator.standard_calculator import StandardCostCalculator
from labor_tracker.costing.service import daily_rate, labor_cost


def test_mason_with_overtime():
    calc = StandardCostCalculator()
    cost = calc.total_cost(rate=100, normal_hours=8, overtime_hours=2, worker_count=3, overtime_multiplier=1.5)
    assert cost == 100 * 8 * 3 + 100 * 2 * 1.5 * 3 == 3300


@pytest.mark.parametrize(
    "rate, nh, oh, wc, m",
    [
        (0, 0, 0, 0, 1.0),
        (75.5, 7.5, 0, 4, 2.0),
        (120, 8, 3.5, 1, 1.25),
        (60, 0, 4, 10, 1.5),
    ],
)
def test_matches_formula(rate, nh, oh, wc, m):
    calc = StandardCostCalculator()
    expected = rate * nh * wc + rate * oh * m * wc
    assert calc.total_cost(rate=rate, normal_hours=nh, overtime_hours=oh, worker_count=wc, overtime_multiplier=m) == pytest.approx(expected)


def test_missing_multiplier_defaults_to_one_and_a_half():
    calc = StandardCostCalculator()
    without = calc.total_cost(rate=90, normal_hours=8, overtime_hours=3, worker_count=2)
    explicit = calc.total_cost(rate=90, normal_hours=8, overtime_hours=3, worker_count=2, overtime_multiplier=1.5)
    assert without == explicit


def test_no_internal_rounding():
    assert labor_cost(33.33, 1, 1, 1, 1.5) == pytest.approx(33.33 + 33.33 * 1.5)


def test_negative_hours_rejected():
    with pytest.raises(ValidationError):
        labor_cost(100, -1, 0, 1)


def test_daily_rate_is_eight_hours():
    assert daily_rate(100) == 800
