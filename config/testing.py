import os

SECRET_KEY = "test-secret"

SUPABASE_CONFIG = {
    "url": os.getenv("SUPABASE_URL", "http://localhost:54321"),
    "key": os.getenv("SUPABASE_KEY", "test-key"),
}

REPORT_DEFAULT_START = "2025-06-01"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
