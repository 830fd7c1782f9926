"""Session gate for account pages.

The storefront never sees passwords after login; the Flask session only
carries the customer's entity id, which is sent to the API as the
impersonated customer.
"""

from functools import wraps
from typing import Callable, TypeVar, Any

from flask import flash, redirect, request, session, url_for
from storefront.app.common.errors import abort_json

F = TypeVar("F", bound=Callable[..., Any])

SESSION_CUSTOMER_KEY = "customer_id"


def current_customer_id() -> int | None:
    return session.get(SESSION_CUSTOMER_KEY)


def login_required(fn: F) -> F:
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if not current_customer_id():
            if request.path.startswith("/api/"):
                abort_json(401, "unauthorized", "Authentication required")
            flash("Please log in to manage your account.", "info")
            return redirect(url_for("auth.login_page"))
        return fn(*args, **kwargs)

    return wrapper  # type: ignore
