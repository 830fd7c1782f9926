from __future__ import annotations

from flask import Blueprint, abort, flash, redirect, render_template, request, url_for

from storefront.app.common.auth import current_customer_id, login_required
from storefront.app.common.form_fields import SHARED_FIELD_IDS, entity_filters
from storefront.app.common.results import is_success
from storefront.i18n.messages import translate
from storefront.modules.account.actions import change_password, update_customer
from storefront.modules.account.page_data import get_customer_settings_query

bp = Blueprint("account", __name__)

ACCOUNT_TABS = ("settings",)


@bp.get("/account/")
@login_required
def account_home():
    return redirect(url_for("account.settings"))


@bp.get("/account/settings/")
@login_required
def settings():
    """GET /<locale>/account/settings/ - Profile form for the logged-in customer."""
    customer_settings = get_customer_settings_query(
        current_customer_id(),
        address=entity_filters(SHARED_FIELD_IDS),
    )
    if not customer_settings:
        abort(404)

    return render_template(
        "pages/account/settings.html",
        tabs=ACCOUNT_TABS,
        active_tab="settings",
        metadata={"title": translate("Account.Home.settings")},
        **customer_settings,
    )


@bp.post("/account/settings/")
@login_required
def settings_submit():
    result = update_customer(request.form, current_customer_id())
    if is_success(result):
        flash(translate("Account.Settings.updated"), "success")
    else:
        flash(result["error"], "error")
    return redirect(url_for("account.settings"))


@bp.get("/account/settings/change-password/")
@login_required
def change_password_page():
    """GET /<locale>/account/settings/change-password/ - Same markup for every customer."""
    return render_template(
        "pages/account/change_password.html",
        tabs=ACCOUNT_TABS,
        active_tab="settings",
        metadata={"title": "Change password"},
    )


@bp.post("/account/settings/change-password/")
@login_required
def change_password_submit():
    result = change_password(request.form, current_customer_id())
    if not is_success(result):
        flash(result["error"], "error")
        return redirect(url_for("account.change_password_page"))

    flash(translate("Account.Settings.passwordUpdated"), "success")
    return redirect(url_for("account.settings"))
