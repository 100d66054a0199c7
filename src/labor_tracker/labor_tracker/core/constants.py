"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_OVERTIME_MULTIPLIER = 1.5
STANDARD_DAY_HOURS = 8

DEFAULT_NORMAL_HOURS = 8
DEFAULT_OVERTIME_HOURS = 0
DEFAULT_WORKER_COUNT = 1

SITE_COUNT = 10
ALL_SITES = "all"

DEFAULT_REPORT_START = "2025-06-01"
EXPORT_FILENAME = "Site_Report.xlsx"
EXPORT_SHEET_NAME = "Report"
UNKNOWN_SUPERVISOR = "Unknown"
