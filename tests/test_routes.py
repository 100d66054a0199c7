from __future__ import annotations

import io

from openpyxl import load_workbook

from labor_tracker.core.enums import Action
from labor_tracker.main import money

from tests.fakes import record

OWNER = "uid-sup@example.com"


def _draft(client):
    with client.session_transaction() as sess:
        return list(sess.get("draft_entries", []))


def test_daily_entry_lists_active_categories(logged_in):
    res = logged_in.get("/")

    assert res.status_code == 200
    assert b"Mason (M)" in res.data
    assert b"Helper (H)" in res.data
    assert b"Site 10" in res.data


def test_add_remove_and_save_flow(logged_in, entries_repo):
    form = {"entry_date": "2025-06-01", "site_id": "site2", "category_id": "cat-mason",
            "normal_hours": "8", "overtime_hours": "2", "worker_count": "3"}
    logged_in.post("/entries/add", data=form)
    logged_in.post("/entries/add", data=form)
    drafts = _draft(logged_in)
    assert len(drafts) == 2

    page = logged_in.get("/")
    assert b"Total Workers: 6" in page.data
    assert "₹6,600".encode() in page.data

    logged_in.post(f"/entries/remove/{drafts[0]['draft_id']}", data={"entry_date": "2025-06-01", "site_id": "site2"})
    assert len(_draft(logged_in)) == 1

    res = logged_in.post("/entries/save", data={"entry_date": "2025-06-01", "site_id": "site2"}, follow_redirects=True)

    assert b"1 entries saved for 2025-06-01" in res.data
    assert _draft(logged_in) == []
    assert len(entries_repo.inserted_batches) == 1
    assert entries_repo.inserted_batches[0][0]["site_id"] == "site2"


def test_save_with_no_entries_is_rejected(logged_in, entries_repo):
    res = logged_in.post("/entries/save", data={"entry_date": "2025-06-01", "site_id": "site1"}, follow_redirects=True)

    assert b"Add at least one entry before saving" in res.data
    assert entries_repo.inserted_batches == []


def test_failed_save_keeps_draft(logged_in, entries_repo):
    logged_in.post("/entries/add", data={"entry_date": "2025-06-01", "site_id": "site1", "category_id": "cat-mason",
                                         "normal_hours": "8", "overtime_hours": "0", "worker_count": "1"})
    entries_repo.fail_with = "connection refused"

    res = logged_in.post("/entries/save", data={"entry_date": "2025-06-01", "site_id": "site1"}, follow_redirects=True)

    assert b"Save failed: connection refused" in res.data
    assert len(_draft(logged_in)) == 1


def test_category_create_with_zero_rate_rejected(logged_in, categories_repo):
    res = logged_in.post("/categories", data={"name": "Painter", "short_code": "P", "hourly_rate": "0"})

    assert res.status_code == 200
    assert b"Validation Error" in res.data
    assert categories_repo.created == []


def test_category_edit_is_one_at_a_time(logged_in):
    logged_in.post("/categories/cat-mason/edit")
    logged_in.post("/categories/cat-helper/edit")
    with logged_in.session_transaction() as sess:
        assert sess["editing_category_id"] == "cat-helper"

    logged_in.post("/categories/cat-helper/update", data={"hourly_rate": "65", "overtime_multiplier": "2"})
    with logged_in.session_transaction() as sess:
        assert "editing_category_id" not in sess


def test_category_toggle(logged_in, categories_repo):
    logged_in.post("/categories/cat-helper/toggle", data={"is_active": "1"})
    assert categories_repo.get_by_id("cat-helper").is_active is False


def test_reports_render_and_export(logged_in, entries_repo):
    entries_repo.records.extend([
        record(),
        record(entry_date="2025-06-01T09:30:00", supervisor_email=None),
        record(entry_date="2025-06-02", site_id="site2"),
    ])

    page = logged_in.get("/reports?site=all&start=2025-06-01&end=2025-06-30")
    assert page.status_code == 200
    assert b"2 day(s) of data loaded" in page.data
    assert "₹6,600".encode() in page.data

    res = logged_in.get("/reports/export")
    assert res.status_code == 200
    assert "Site_Report.xlsx" in res.headers["Content-Disposition"]

    ws = load_workbook(io.BytesIO(res.data))["Report"]
    rows = list(ws.iter_rows(min_row=2, values_only=True))
    assert rows[0] == ("2025-06-02", "site2", "Mason (M)", 3, 3300, "sup@example.com")
    assert ("2025-06-01", "site1", "Mason (M)", 3, 3300, "Unknown") in rows
    assert len(rows) == 3


def test_reports_store_error_flashes(logged_in, entries_repo):
    entries_repo.fail_with = "JWT expired"
    res = logged_in.get("/reports")

    assert b"Error fetching data: JWT expired" in res.data
    assert b"No Report Found" in res.data


def test_overlapping_daily_save_is_refused(logged_in, container, entries_repo):
    logged_in.post("/entries/add", data={"entry_date": "2025-06-01", "site_id": "site1", "category_id": "cat-mason",
                                         "normal_hours": "8", "overtime_hours": "0", "worker_count": "1"})
    container.actions.begin(OWNER, Action.SAVE_DAILY)

    res = logged_in.post("/entries/save", data={"entry_date": "2025-06-01", "site_id": "site1"}, follow_redirects=True)

    assert b"already in progress" in res.data
    assert entries_repo.inserted_batches == []
    assert len(_draft(logged_in)) == 1


def test_overlapping_category_writes_are_refused(logged_in, container, categories_repo):
    container.actions.begin(OWNER, Action.SAVE_CATEGORY)

    res = logged_in.post("/categories", data={"name": "Painter", "short_code": "P", "hourly_rate": "90"})
    assert b"Validation Error: This action is already in progress" in res.data

    res = logged_in.post("/categories/cat-helper/update", data={"hourly_rate": "70"}, follow_redirects=True)
    assert b"Update Error: This action is already in progress" in res.data

    assert categories_repo.created == []
    assert categories_repo.get_by_id("cat-helper").hourly_rate == 60.0


def test_superseded_report_fetch_keeps_previous_filters(logged_in, container, entries_repo, monkeypatch):
    logged_in.get("/reports?site=site1&start=2025-06-01&end=2025-06-30")
    list_between = entries_repo.list_between

    def newer_fetch_starts_meanwhile(**kwargs):
        container.actions.begin(OWNER, Action.FETCH_REPORT, exclusive=False)
        return list_between(**kwargs)

    monkeypatch.setattr(entries_repo, "list_between", newer_fetch_starts_meanwhile)
    res = logged_in.get("/reports?site=site2&start=2025-06-05&end=2025-06-06")

    assert res.status_code == 200
    assert b"day(s) of data loaded" not in res.data
    with logged_in.session_transaction() as sess:
        assert sess["report_filters"] == {"site": "site1", "start": "2025-06-01", "end": "2025-06-30"}


def test_money_rounds_halves_up_like_the_export(logged_in, entries_repo):
    assert money(12.5) == "₹13"
    assert money(1234567.5) == "₹1,234,568"
    assert money(None) == "₹0"

    entries_repo.records.append(record(rate=12.5, normal_hours=1, overtime_hours=0, num_workers=1))
    page = logged_in.get("/reports?site=all&start=2025-06-01&end=2025-06-30")
    assert "₹13".encode() in page.data
    assert "₹12".encode() not in page.data

    ws = load_workbook(io.BytesIO(logged_in.get("/reports/export").data))["Report"]
    assert list(ws.iter_rows(min_row=2, values_only=True))[0][4] == 13
