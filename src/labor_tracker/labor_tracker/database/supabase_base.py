from __future__ import annotations

import logging
from typing import Any, Dict, List

from supabase import PostgrestAPIError

from ..core.exceptions import StoreError

logger = logging.getLogger(__name__)


def execute(query, *, what: str) -> List[Dict[str, Any]]:
    """Run a postgrest query builder and return its rows.

    Backend errors are re-raised as StoreError carrying the provider's message.
    """
    try:
        response = query.execute()
    except PostgrestAPIError as e:
        logger.warning("Supabase %s failed: %s", what, e.message)
        raise StoreError(e.message or f"{what} failed") from e
    return list(response.data or [])


def as_float(value: Any, default: float = 0.0) -> float:
    if value is None or value == "":
        return default
    return float(value)


def as_optional_float(value: Any):
    """Null or 0 reads as unset."""
    if value is None or value == "" or float(value) == 0:
        return None
    return float(value)
