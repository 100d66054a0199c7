from __future__ import annotations

import io
from typing import Iterable

import pandas as pd

from ..core.constants import EXPORT_SHEET_NAME

COLUMNS = ["Date", "Site", "Category", "Workers", "Cost", "Supervisor"]


def build_excel_report(rows: Iterable[dict], *, sheet_name: str = EXPORT_SHEET_NAME) -> io.BytesIO:
    """Write flat report rows to an in-memory .xlsx with a single sheet."""
    df = pd.DataFrame(list(rows), columns=COLUMNS)

    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    out.seek(0)
    return out
