from __future__ import annotations

import pytest

from labor_tracker.categories.service import CategoryService
from labor_tracker.core.exceptions import ValidationError

from tests.fakes import InMemoryCategories, mason


def test_zero_rate_rejected_without_creating():
    repo = InMemoryCategories()
    svc = CategoryService(repo)

    with pytest.raises(ValidationError, match="Fill all fields"):
        svc.create(name="Mason", short_code="M", hourly_rate=0)
    assert repo.created == []


@pytest.mark.parametrize("name, code, rate", [("", "M", 100), ("Mason", "  ", 100), ("Mason", "M", -5), ("Mason", "M", "abc")])
def test_missing_fields_rejected(name, code, rate):
    repo = InMemoryCategories()
    with pytest.raises(ValidationError):
        CategoryService(repo).create(name=name, short_code=code, hourly_rate=rate)
    assert repo.created == []


def test_multiplier_below_one_rejected():
    repo = InMemoryCategories()
    with pytest.raises(ValidationError):
        CategoryService(repo).create(name="Mason", short_code="M", hourly_rate=100, overtime_multiplier="0.5")
    assert repo.created == []


def test_create_defaults_and_lists_by_name():
    repo = InMemoryCategories()
    svc = CategoryService(repo)

    svc.create(name=" Mason ", short_code="M", hourly_rate="100", overtime_multiplier="")
    svc.create(name="Carpenter", short_code="C", hourly_rate=110, overtime_multiplier="2")

    names = [c.name for c in svc.list_categories()]
    assert names == ["Carpenter", "Mason"]
    created = {c.name: c for c in svc.list_categories()}
    assert created["Mason"].overtime_multiplier == 1.5
    assert created["Mason"].is_active
    assert created["Carpenter"].overtime_multiplier == 2.0


def test_toggle_active_is_single_field_update():
    repo = InMemoryCategories([mason()])
    svc = CategoryService(repo)

    assert svc.toggle_active("cat-mason", True) is False

    assert repo.updates == [("cat-mason", {"is_active": False})]
    assert svc.list_categories(active_only=True) == []


def test_partial_update_validates_values():
    repo = InMemoryCategories([mason()])
    svc = CategoryService(repo)

    svc.update("cat-mason", {"hourly_rate": "120"})
    assert svc.get("cat-mason").hourly_rate == 120.0

    with pytest.raises(ValidationError):
        svc.update("cat-mason", {"hourly_rate": "0"})
    with pytest.raises(ValidationError):
        svc.update("cat-mason", {"id": "other"})
    assert len(repo.updates) == 1


def test_label_and_daily_rate():
    cat = mason()
    assert cat.label == "Mason (M)"
    assert cat.daily_rate == 800


@pytest.mark.parametrize("rate", ["nan", "inf", float("nan")])
def test_non_finite_rate_rejected_without_creating(rate):
    repo = InMemoryCategories()

    with pytest.raises(ValidationError, match="Fill all fields"):
        CategoryService(repo).create(name="Mason", short_code="M", hourly_rate=rate)
    assert repo.created == []


def test_non_finite_update_values_rejected():
    repo = InMemoryCategories([mason()])

    with pytest.raises(ValidationError, match="must be a number"):
        CategoryService(repo).update("cat-mason", {"overtime_multiplier": "nan"})
    assert repo.get_by_id("cat-mason").overtime_multiplier == 1.5
