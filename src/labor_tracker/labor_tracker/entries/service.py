from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from ..auth.model import SessionUser
from ..auth.service import AuthService
from ..categories.model import WorkerCategory
from ..categories.repository import CategoryRepository
from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_at_least, require_non_negative, require_number
from ..core.constants import SITE_COUNT
from ..core.exceptions import AuthenticationError, ValidationError
from ..costing.calculator.base import CostCalculator
from .draft import DraftSession
from .model import DraftEntry
from .repository import EntryRepository

logger = logging.getLogger(__name__)


def site_options(count: int = SITE_COUNT) -> List[dict]:
    return [{"id": f"site{i}", "name": f"Site {i}"} for i in range(1, count + 1)]


class EntryService:
    """Use case: build a day's draft of worker lines and post it as one batch."""

    def __init__(
        self,
        entries: EntryRepository,
        categories: CategoryRepository,
        auth: AuthService,
        *,
        calculator: CostCalculator,
    ):
        self._entries = entries
        self._categories = categories
        self._auth = auth
        self._calculator = calculator

    def active_categories(self) -> Sequence[WorkerCategory]:
        return self._categories.list_all(active_only=True)

    def add_draft(
        self,
        draft: DraftSession,
        *,
        category_id: Optional[str],
        normal_hours: Any,
        overtime_hours: Any,
        worker_count: Any,
    ) -> DraftEntry:
        if not category_id:
            raise ValidationError("Please select a worker category.")

        normal = require_non_negative(require_number(normal_hours, "Normal hours"), "Normal hours")
        overtime = require_non_negative(require_number(overtime_hours, "OT hours"), "OT hours")
        workers = require_number(worker_count, "Workers")
        if workers != int(workers):
            raise ValidationError("Workers must be a whole number")
        workers = int(require_at_least(workers, "Workers", 1))

        selected = next((c for c in self.active_categories() if c.category_id == category_id), None)
        if selected is None:
            raise ValidationError("Selected worker category is no longer available.")

        cost = self._calculator.total_cost(
            rate=selected.hourly_rate,
            normal_hours=normal,
            overtime_hours=overtime,
            worker_count=workers,
            overtime_multiplier=selected.overtime_multiplier,
        )
        return draft.append(
            category=selected.label,
            normal_hours=normal,
            overtime_hours=overtime,
            worker_count=workers,
            rate=selected.hourly_rate,
            overtime_multiplier=selected.overtime_multiplier,
            total_cost=cost,
        )

    def remove_draft(self, draft: DraftSession, draft_id: str) -> None:
        draft.remove(draft_id)

    def submit(
        self,
        draft: DraftSession,
        *,
        entry_date: str,
        site_id: Optional[str],
        user: Optional[SessionUser],
    ) -> int:
        """Save every draft line; clears the draft only when the insert succeeded."""
        if not site_id:
            raise ValidationError("Site not selected. Please select a site.")
        if draft.is_empty():
            raise ValidationError("No entries. Add at least one entry before saving.")
        entry_date = parse_iso_date(entry_date).isoformat()

        try:
            who = self._auth.current_user(user)
        except AuthenticationError:
            raise ValidationError("User not authenticated. Please log in to submit entries.")

        rows = draft.to_rows(entry_date=entry_date, site_id=site_id, user=who)
        self._entries.insert_many(rows)
        draft.clear()
        logger.info("Saved %d entries for %s at %s by %s", len(rows), entry_date, site_id, who.email)
        return len(rows)
