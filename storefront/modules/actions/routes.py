"""JSON endpoints for client-side forms.

Each endpoint runs the same form action as the HTML page and returns its
tagged result as-is, with password fields removed.
"""

from __future__ import annotations

from flask import Blueprint, jsonify

from storefront.app.common.auth import current_customer_id, login_required
from storefront.app.common.results import public_result
from storefront.app.common.validation import get_form
from storefront.modules.account.actions import change_password, update_customer
from storefront.modules.register.actions import register_customer

bp = Blueprint("actions", __name__)

RECAPTCHA_TOKEN_FIELD = "reCaptchaToken"


@bp.post("/actions/register-customer")
def register_customer_action():
    """POST /api/actions/register-customer"""
    form = get_form()
    result = register_customer(form, recaptcha_token=form.get(RECAPTCHA_TOKEN_FIELD) or None)
    return jsonify(public_result(result)), 200


@bp.post("/actions/update-customer")
@login_required
def update_customer_action():
    """POST /api/actions/update-customer"""
    result = update_customer(get_form(), current_customer_id())
    return jsonify(public_result(result)), 200


@bp.post("/actions/change-password")
@login_required
def change_password_action():
    """POST /api/actions/change-password"""
    result = change_password(get_form(), current_customer_id())
    return jsonify(public_result(result)), 200
