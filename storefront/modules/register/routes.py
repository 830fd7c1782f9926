from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, abort, flash, redirect, render_template, request, url_for

from storefront.app.common.results import SENSITIVE_KEYS, is_success
from storefront.i18n.messages import translate
from storefront.modules.register.actions import register_customer
from storefront.modules.register.page_data import get_register_customer_query

bp = Blueprint("register", __name__)

RECAPTCHA_FIELD = "g-recaptcha-response"


def submitted_values(form: Any) -> Dict[str, str]:
    """Submitted inputs to put back into the form, passwords and captcha excluded."""
    return {
        name: value
        for name, value in form.items()
        if name != RECAPTCHA_FIELD and name.split("-")[-1] not in SENSITIVE_KEYS
    }


def render_register_form(form_error: str | None = None, submitted: Dict[str, str] | None = None):
    page_data = get_register_customer_query()
    if not page_data:
        abort(404)

    return render_template(
        "pages/login/register_customer.html",
        metadata={"title": translate("Register.heading")},
        form_error=form_error,
        submitted=submitted or {},
        **page_data,
    )


@bp.get("/login/register-customer/")
def register_customer_page():
    """GET /<locale>/login/register-customer/ - Registration form."""
    return render_register_form()


@bp.post("/login/register-customer/")
def register_customer_submit():
    """POST /<locale>/login/register-customer/ - Create the customer through the API.

    Errors re-render the form with what the customer typed, minus passwords.
    """
    recaptcha_token = request.form.get(RECAPTCHA_FIELD) or None
    result = register_customer(request.form, recaptcha_token=recaptcha_token)

    if not is_success(result):
        return render_register_form(result["error"], submitted_values(request.form))

    data = result["data"]
    name = " ".join(p for p in (data.get("firstName"), data.get("lastName")) if p) or data["email"]
    flash(translate("Register.success", name=name), "success")
    return redirect(url_for("auth.login_page"))
