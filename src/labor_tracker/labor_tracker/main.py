from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.app_logging import configure_logging
from .container import Container, build_container
from .core.constants import DEFAULT_REPORT_START
from .reports.service import round_half_up
from .auth.controller import register as register_auth
from .categories.controller import register as register_categories
from .entries.controller import register as register_entries
from .reports.controller import register as register_reports


def money(value) -> str:
    # Same half-up rounding as the Excel export.
    return f"₹{round_half_up(float(value or 0)):,}"


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["REPORT_DEFAULT_START"] = getattr(settings, "REPORT_DEFAULT_START", DEFAULT_REPORT_START)

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        supabase_config = getattr(settings, "SUPABASE_CONFIG")
        container = build_container(supabase_config=supabase_config)
        app.logger.info(
            "[labor-tracker] settings=%s supabase=%s", settings_module, container.conn.config.host if container.conn else "-"
        )

    app.jinja_env.filters["money"] = money

    register_auth(app, container)
    register_entries(app, container)
    register_categories(app, container)
    register_reports(app, container)

    return app
