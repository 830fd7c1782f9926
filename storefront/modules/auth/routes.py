from __future__ import annotations

from flask import Blueprint, flash, redirect, render_template, request, session, url_for

from storefront.app.common.auth import SESSION_CUSTOMER_KEY, current_customer_id
from storefront.app.common.results import is_success
from storefront.i18n.messages import translate
from storefront.modules.auth.actions import login

bp = Blueprint("auth", __name__)


@bp.get("/login/")
def login_page():
    if current_customer_id():
        return redirect(url_for("account.settings"))
    return render_template("pages/login/login.html", metadata={"title": translate("Login.heading")})


@bp.post("/login/")
def login_submit():
    """POST /<locale>/login/ - Authenticate and start a session."""
    result = login(request.form)
    if not is_success(result):
        flash(result["error"], "error")
        return redirect(url_for("auth.login_page"))

    session.clear()
    session[SESSION_CUSTOMER_KEY] = result["data"]["entityId"]
    flash(translate("Login.loggedIn"), "success")
    return redirect(url_for("account.settings"))


@bp.post("/logout/")
def logout():
    """POST /<locale>/logout/ - Terminate session."""
    session.pop(SESSION_CUSTOMER_KEY, None)
    flash(translate("Login.loggedOut"), "success")
    return redirect(url_for("auth.login_page"))
