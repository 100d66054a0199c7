from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.actions import track
from ..common.datetime_utils import today_iso
from ..common.web import action_owner, current_session_user, flash_unexpected, login_required
from ..core.constants import DEFAULT_NORMAL_HOURS, DEFAULT_OVERTIME_HOURS, DEFAULT_WORKER_COUNT
from ..core.enums import Action
from ..core.exceptions import StoreError, ValidationError
from ..container import Container
from .draft import DraftSession
from .service import site_options

DRAFT_KEY = "draft_entries"
DATE_KEY = "entry_date"
SITE_KEY = "entry_site_id"


def register(app: Flask, container: Container) -> None:
    def _load_draft() -> DraftSession:
        return DraftSession.from_session(session.get(DRAFT_KEY))

    def _store_draft(draft: DraftSession) -> None:
        session[DRAFT_KEY] = draft.to_session()

    def _remember_header() -> None:
        if "entry_date" in request.form:
            session[DATE_KEY] = request.form.get("entry_date") or today_iso()
        if "site_id" in request.form:
            session[SITE_KEY] = request.form.get("site_id", "")

    @app.route("/", endpoint="daily_entry")
    @login_required
    def daily_entry():
        categories = []
        try:
            categories = container.entry_service.active_categories()
        except StoreError as e:
            flash(f"Error fetching categories: {e}", "danger")
        except Exception as e:
            flash_unexpected("fetching categories", e)

        draft = _load_draft()
        return render_template(
            "daily_entry.html",
            categories=categories,
            sites=site_options(),
            entry_date=session.get(DATE_KEY) or today_iso(),
            site_id=session.get(SITE_KEY, ""),
            draft=draft,
            defaults={
                "normal_hours": DEFAULT_NORMAL_HOURS,
                "overtime_hours": DEFAULT_OVERTIME_HOURS,
                "worker_count": DEFAULT_WORKER_COUNT,
            },
            active_page="daily_entry",
        )

    @app.route("/entries/add", methods=["POST"], endpoint="add_entry")
    @login_required
    def add_entry():
        _remember_header()
        draft = _load_draft()
        try:
            entry = container.entry_service.add_draft(
                draft,
                category_id=request.form.get("category_id"),
                normal_hours=request.form.get("normal_hours"),
                overtime_hours=request.form.get("overtime_hours"),
                worker_count=request.form.get("worker_count"),
            )
            _store_draft(draft)
            flash(f"Entry added: {entry.category} workers added.", "success")
        except (ValidationError, StoreError) as e:
            flash(str(e), "danger")
        except Exception as e:
            flash_unexpected("adding the entry", e)
        return redirect(url_for("daily_entry"))

    @app.route("/entries/remove/<draft_id>", methods=["POST"], endpoint="remove_entry")
    @login_required
    def remove_entry(draft_id: str):
        _remember_header()
        draft = _load_draft()
        container.entry_service.remove_draft(draft, draft_id)
        _store_draft(draft)
        return redirect(url_for("daily_entry"))

    @app.route("/entries/save", methods=["POST"], endpoint="save_daily")
    @login_required
    def save_daily():
        _remember_header()
        draft = _load_draft()
        entry_date = session.get(DATE_KEY) or today_iso()
        try:
            with track(container.actions, action_owner(), Action.SAVE_DAILY):
                saved = container.entry_service.submit(
                    draft,
                    entry_date=entry_date,
                    site_id=session.get(SITE_KEY),
                    user=current_session_user(),
                )
            _store_draft(draft)
            flash(f"Entries saved: {saved} entries saved for {entry_date}", "success")
        except ValidationError as e:
            flash(str(e), "danger")
        except StoreError as e:
            flash(f"Save failed: {e}", "danger")
        except Exception as e:
            flash_unexpected("saving the daily entry", e)
        return redirect(url_for("daily_entry"))
