from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.actions import track
from ..common.web import action_owner, flash_unexpected, login_required
from ..core.constants import DEFAULT_OVERTIME_MULTIPLIER
from ..core.enums import Action
from ..core.exceptions import StoreError, ValidationError
from ..container import Container

EDITING_KEY = "editing_category_id"


def register(app: Flask, container: Container) -> None:
    @app.route("/categories", methods=["GET", "POST"], endpoint="categories")
    @login_required
    def categories():
        form = {"name": "", "short_code": "", "hourly_rate": "", "overtime_multiplier": DEFAULT_OVERTIME_MULTIPLIER}

        if request.method == "POST":
            form = {key: request.form.get(key, "") for key in form}
            try:
                with track(container.actions, action_owner(), Action.SAVE_CATEGORY):
                    container.category_service.create(
                        name=form["name"],
                        short_code=form["short_code"],
                        hourly_rate=form["hourly_rate"],
                        overtime_multiplier=form["overtime_multiplier"],
                    )
                flash("Category added successfully", "success")
                return redirect(url_for("categories"))
            except ValidationError as e:
                flash(f"Validation Error: {e}", "danger")
            except StoreError as e:
                flash(f"Error: {e}", "danger")
            except Exception as e:
                flash_unexpected("adding the category", e)

        items = []
        try:
            items = container.category_service.list_categories()
        except StoreError as e:
            flash(f"Error fetching categories: {e}", "danger")
        except Exception as e:
            flash_unexpected("fetching categories", e)

        return render_template(
            "categories.html",
            categories=items,
            form=form,
            editing_id=session.get(EDITING_KEY),
            active_page="categories",
        )

    @app.route("/categories/<category_id>/edit", methods=["POST"], endpoint="edit_category")
    @login_required
    def edit_category(category_id: str):
        # One category editable at a time; clicking the open one closes it.
        if session.get(EDITING_KEY) == category_id:
            session.pop(EDITING_KEY, None)
        else:
            session[EDITING_KEY] = category_id
        return redirect(url_for("categories"))

    @app.route("/categories/<category_id>/update", methods=["POST"], endpoint="update_category")
    @login_required
    def update_category(category_id: str):
        updates = {
            key: request.form[key]
            for key in ("name", "short_code", "hourly_rate", "overtime_multiplier")
            if request.form.get(key, "") != ""
        }
        try:
            with track(container.actions, action_owner(), Action.SAVE_CATEGORY):
                container.category_service.update(category_id, updates)
            session.pop(EDITING_KEY, None)
            flash("Updated: Category updated", "success")
        except (ValidationError, StoreError) as e:
            flash(f"Update Error: {e}", "danger")
        except Exception as e:
            flash_unexpected("updating the category", e)
        return redirect(url_for("categories"))

    @app.route("/categories/<category_id>/toggle", methods=["POST"], endpoint="toggle_category")
    @login_required
    def toggle_category(category_id: str):
        current = request.form.get("is_active") in ("1", "true", "True", "on")
        try:
            with track(container.actions, action_owner(), Action.SAVE_CATEGORY):
                active = container.category_service.toggle_active(category_id, current)
            session.pop(EDITING_KEY, None)
            flash(f"Updated: Category {'activated' if active else 'deactivated'}", "success")
        except (ValidationError, StoreError) as e:
            flash(f"Update Error: {e}", "danger")
        except Exception as e:
            flash_unexpected("updating the category", e)
        return redirect(url_for("categories"))
