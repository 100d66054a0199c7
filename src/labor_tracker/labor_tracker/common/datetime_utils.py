from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r}")


def today_iso() -> str:
    """Today's date as YYYY-MM-DD.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today().isoformat()


def truncate_to_day(value: str) -> str:
    """Drop the time part of a stored timestamp.

    The backend may hand back ``2025-06-01``, ``2025-06-01T10:00:00`` or
    ``2025-06-01 10:00:00`` for the same calendar day.
    """
    value = str(value)
    for sep in ("T", " "):
        if sep in value:
            return value.split(sep, 1)[0]
    return value
