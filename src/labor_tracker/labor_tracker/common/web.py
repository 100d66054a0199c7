from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import current_app, flash, redirect, session, url_for

from ..auth.model import SessionUser

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "user"


def current_session_user() -> Optional[SessionUser]:
    return SessionUser.from_dict(session.get(SESSION_USER_KEY))


def action_owner() -> str:
    user = current_session_user()
    return user.user_id if user else "anonymous"


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_session_user() is None:
            flash("Please log in to continue.", "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def flash_unexpected(what: str, exc: Exception) -> None:
    """Log the traceback and show a generic message (detail only in DEBUG)."""
    logger.exception("Unexpected error while %s", what)
    if bool(current_app.config.get("DEBUG", False)):
        flash(f"Unexpected error while {what}: {exc}", "danger")
    else:
        flash(f"Unexpected error while {what}.", "danger")
