from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, send_file, session, url_for

from ..common.actions import track
from ..common.datetime_utils import parse_iso_date, today_iso
from ..common.web import action_owner, flash_unexpected, login_required
from ..core.constants import ALL_SITES, EXPORT_FILENAME
from ..core.enums import Action
from ..core.exceptions import StoreError, ValidationError
from ..container import Container
from ..entries.service import site_options
from .excel_exporter import build_excel_report

FILTERS_KEY = "report_filters"


def register(app: Flask, container: Container) -> None:
    def _default_start() -> str:
        return str(app.config.get("REPORT_DEFAULT_START"))

    @app.route("/reports", endpoint="reports")
    @login_required
    def reports():
        site_id = request.args.get("site") or ALL_SITES
        start_s = request.args.get("start") or _default_start()
        end_s = request.args.get("end") or today_iso()

        data = []
        try:
            start = parse_iso_date(start_s)
            end = parse_iso_date(end_s)
            with track(container.actions, action_owner(), Action.FETCH_REPORT, exclusive=False) as ticket:
                data = container.report_service.build_daily_reports(start=start, end=end, site_id=site_id)

            # An older request finishing late must not replace what export uses.
            if ticket.current:
                session[FILTERS_KEY] = {"site": site_id, "start": start_s, "end": end_s}
                flash(f"Report Loaded: {len(data)} day(s) of data loaded", "info")
        except ValidationError as e:
            flash(str(e), "danger")
        except StoreError as e:
            flash(f"Error fetching data: {e}", "danger")
        except Exception as e:
            flash_unexpected("fetching data", e)

        return render_template(
            "reports.html",
            reports=data,
            cost_of=container.report_service.cost_of,
            sites=site_options(),
            site_id=site_id,
            start=start_s,
            end=end_s,
            active_page="reports",
        )

    @app.route("/reports/export", endpoint="export_report")
    @login_required
    def export_report():
        filters = session.get(FILTERS_KEY) or {}
        site_id = filters.get("site") or ALL_SITES
        start_s = filters.get("start") or _default_start()
        end_s = filters.get("end") or today_iso()

        try:
            data = container.report_service.build_daily_reports(
                start=parse_iso_date(start_s),
                end=parse_iso_date(end_s),
                site_id=site_id,
            )
            out = build_excel_report(container.report_service.export_rows(data))
            return send_file(
                out,
                mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
                as_attachment=True,
                download_name=EXPORT_FILENAME,
            )
        except (ValidationError, StoreError) as e:
            flash(f"Export failed: {e}", "danger")
        except Exception as e:
            flash_unexpected("exporting the report", e)
        return redirect(url_for("reports", site=site_id, start=start_s, end=end_s))
