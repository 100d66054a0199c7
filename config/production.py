import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

SUPABASE_CONFIG = {
    "url": os.getenv("SUPABASE_URL", ""),
    "key": os.getenv("SUPABASE_KEY", ""),
    "entries_table": os.getenv("SUPABASE_ENTRIES_TABLE", "daily_entries"),
    "categories_table": os.getenv("SUPABASE_CATEGORIES_TABLE", "worker_categories"),
}

REPORT_DEFAULT_START = os.getenv("REPORT_DEFAULT_START", "2025-06-01")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
