import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

SUPABASE_CONFIG = {
    "url": os.getenv("SUPABASE_URL", "http://localhost:54321"),
    "key": os.getenv("SUPABASE_KEY", ""),
    "entries_table": os.getenv("SUPABASE_ENTRIES_TABLE", "daily_entries"),
    "categories_table": os.getenv("SUPABASE_CATEGORIES_TABLE", "worker_categories"),
}

# First day shown on the reports screen when no filter is given
REPORT_DEFAULT_START = os.getenv("REPORT_DEFAULT_START", "2025-06-01")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
