from __future__ import annotations

import logging
import math
from datetime import date
from typing import Dict, Iterable, List, Optional

from ..common.datetime_utils import truncate_to_day
from ..core.constants import ALL_SITES, UNKNOWN_SUPERVISOR
from ..core.exceptions import ValidationError
from ..costing.calculator.base import CostCalculator
from ..entries.model import DailyEntryRecord
from ..entries.repository import EntryRepository
from .model import CategorySubtotal, DailyReport

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def entry_cost(entry: DailyEntryRecord, calculator: CostCalculator) -> float:
    return calculator.total_cost(
        rate=entry.rate,
        normal_hours=entry.normal_hours,
        overtime_hours=entry.overtime_hours,
        worker_count=entry.num_workers,
        overtime_multiplier=entry.overtime_multiplier,
    )


def group_entries_by_date(entries: Iterable[DailyEntryRecord], calculator: CostCalculator) -> List[DailyReport]:
    """Group posted entries per calendar day, newest day first.

    Cost is recomputed from rate/hours/workers rather than read from the row.
    Rows the calculator refuses (negative values written by other clients)
    are logged and left out instead of failing the whole range.
    """
    grouped: Dict[str, DailyReport] = {}
    subtotals: Dict[str, Dict[str, CategorySubtotal]] = {}

    for entry in entries:
        day = truncate_to_day(entry.entry_date)
        try:
            cost = entry_cost(entry, calculator)
        except ValidationError as e:
            logger.warning("Skipping %s entry at %s on %s: %s", entry.category, entry.site_id, day, e)
            continue

        report = grouped.get(day)
        if report is None:
            report = DailyReport(date=day)
            grouped[day] = report
            subtotals[day] = {}

        report.total_workers += entry.num_workers
        report.total_cost += cost
        report.entries.append(entry)

        sub = subtotals[day].get(entry.category)
        if sub is None:
            sub = CategorySubtotal(name=entry.category)
            subtotals[day][entry.category] = sub
            report.categories.append(sub)
        sub.workers += entry.num_workers
        sub.cost += cost

    return sorted(grouped.values(), key=lambda r: r.date, reverse=True)


class ReportService:
    def __init__(self, entries: EntryRepository, *, calculator: CostCalculator):
        self._entries = entries
        self._calculator = calculator

    def build_daily_reports(self, *, start: date, end: date, site_id: Optional[str] = None) -> List[DailyReport]:
        if start > end:
            raise ValidationError("Start date must not be after end date")
        site = None if not site_id or site_id == ALL_SITES else site_id

        rows = self._entries.list_between(start_date=start, end_date=end, site_id=site)
        reports = group_entries_by_date(rows, self._calculator)
        logger.info("Report %s..%s site=%s: %d rows, %d day(s)", start, end, site or ALL_SITES, len(rows), len(reports))
        return reports

    def cost_of(self, entry: DailyEntryRecord) -> float:
        return entry_cost(entry, self._calculator)

    def export_rows(self, reports: Iterable[DailyReport]) -> List[dict]:
        rows: List[dict] = []
        for report in reports:
            for entry in report.entries:
                rows.append(
                    {
                        "Date": report.date,
                        "Site": entry.site_id,
                        "Category": entry.category,
                        "Workers": entry.num_workers,
                        "Cost": round_half_up(self.cost_of(entry)),
                        "Supervisor": entry.supervisor_email or UNKNOWN_SUPERVISOR,
                    }
                )
        return rows
