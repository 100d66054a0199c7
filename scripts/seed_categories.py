from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "labor_tracker"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from dotenv import load_dotenv

from config import get_settings_module

from labor_tracker.container import build_container

DEFAULT_CATEGORIES = [
    ("Mason", "M", 100.0),
    ("Helper", "H", 60.0),
    ("Carpenter", "C", 110.0),
    ("Bar Bender", "BB", 95.0),
    ("Electrician", "E", 120.0),
]


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(supabase_config=dict(settings.SUPABASE_CONFIG))

    existing = {c.name.lower() for c in container.category_service.list_categories()}
    added = 0
    for name, code, rate in DEFAULT_CATEGORIES:
        if name.lower() in existing:
            continue
        container.category_service.create(name=name, short_code=code, hourly_rate=rate)
        added += 1

    print(f"OK: Seeded worker categories -> {container.conn.config.host} (added={added})")


if __name__ == "__main__":
    main()
