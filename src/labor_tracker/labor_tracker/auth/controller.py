from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.web import SESSION_USER_KEY, current_session_user, flash_unexpected
from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if current_session_user() is not None:
            return redirect(url_for("daily_entry"))

        email = ""
        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")

            try:
                user = container.auth_service.login(email, password)
                session.clear()
                session[SESSION_USER_KEY] = user.to_dict()
                flash("Logged in successfully.", "success")
                return redirect(url_for("daily_entry"))
            except (AuthenticationError, ValidationError) as e:
                flash(str(e), "danger")
            except Exception as e:
                flash_unexpected("logging in", e)

        return render_template("login.html", email=email)

    @app.route("/logout", endpoint="logout")
    def logout():
        try:
            container.auth_service.logout(current_session_user())
        except Exception:
            app.logger.exception("Sign-out failed, dropping local session anyway")
        session.clear()
        flash("You have been logged out successfully.", "info")
        return redirect(url_for("login"))
