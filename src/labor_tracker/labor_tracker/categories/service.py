from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Sequence

from ..common.validators import require_at_least, require_non_empty, require_number, require_positive
from ..core.constants import DEFAULT_OVERTIME_MULTIPLIER
from ..core.exceptions import ValidationError
from .model import WorkerCategory
from .repository import CategoryRepository

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "short_code", "hourly_rate", "overtime_multiplier", "is_active")


class CategoryService:
    """Use case: manage the worker category reference list."""

    def __init__(self, categories: CategoryRepository):
        self._categories = categories

    def list_categories(self, *, active_only: bool = False) -> Sequence[WorkerCategory]:
        return self._categories.list_all(active_only=active_only)

    def get(self, category_id: str) -> Optional[WorkerCategory]:
        return self._categories.get_by_id(category_id)

    def create(
        self,
        *,
        name: str,
        short_code: str,
        hourly_rate: Any,
        overtime_multiplier: Any = DEFAULT_OVERTIME_MULTIPLIER,
    ) -> None:
        name = (name or "").strip()
        short_code = (short_code or "").strip()
        try:
            rate = require_number(hourly_rate, "Hourly rate")
        except ValidationError:
            rate = 0.0
        if not name or not short_code or rate <= 0:
            raise ValidationError("Fill all fields: name, short code and an hourly rate above 0")

        multiplier = DEFAULT_OVERTIME_MULTIPLIER
        if overtime_multiplier not in (None, ""):
            multiplier = require_at_least(require_number(overtime_multiplier, "OT multiplier"), "OT multiplier", 1)

        self._categories.create(
            name=name,
            short_code=short_code,
            hourly_rate=rate,
            overtime_multiplier=multiplier,
            is_active=True,
        )
        logger.info("Category %s (%s) created at %.2f/hr", name, short_code, rate)

    def update(self, category_id: str, updates: Mapping[str, Any]) -> None:
        if not category_id:
            raise ValidationError("Category not selected")
        clean = self._clean_updates(updates)
        if not clean:
            raise ValidationError("Nothing to update")
        self._categories.update(category_id, clean)

    def toggle_active(self, category_id: str, current: bool) -> bool:
        new_value = not bool(current)
        self.update(category_id, {"is_active": new_value})
        return new_value

    def _clean_updates(self, updates: Mapping[str, Any]) -> Dict[str, Any]:
        clean: Dict[str, Any] = {}
        for key, value in updates.items():
            if key not in EDITABLE_FIELDS:
                raise ValidationError(f"Field {key!r} cannot be edited")
            if key in ("name", "short_code"):
                clean[key] = require_non_empty(value, "Name" if key == "name" else "Short code")
            elif key == "hourly_rate":
                clean[key] = require_positive(require_number(value, "Hourly rate"), "Hourly rate")
            elif key == "overtime_multiplier":
                clean[key] = require_at_least(require_number(value, "OT multiplier"), "OT multiplier", 1)
            else:
                clean[key] = bool(value)
        return clean
