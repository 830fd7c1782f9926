"""Locale-prefixed routing.

Every page lives under ``/<locale>/``. The prefix is stripped before the
view runs and re-added by ``url_for`` from the active request locale.
"""

from __future__ import annotations

from typing import Dict, List

from flask import Flask, abort, current_app, g, has_request_context, redirect, request, url_for


def get_locales() -> List[str]:
    return list(current_app.config["LOCALES"])


def get_default_locale() -> str:
    return current_app.config["DEFAULT_LOCALE"]


def generate_static_params() -> List[Dict[str, str]]:
    return [{"locale": locale} for locale in get_locales()]


def set_request_locale(locale: str) -> None:
    g.locale = locale


def negotiate_locale() -> str:
    if has_request_context():
        best = request.accept_languages.best_match(get_locales())
        if best:
            return best
    return get_default_locale()


def get_request_locale() -> str:
    return g.get("locale") or negotiate_locale()


def init_locale_routing(app: Flask) -> None:
    if app.config["DEFAULT_LOCALE"] not in app.config["LOCALES"]:
        raise ValueError(f"DEFAULT_LOCALE {app.config['DEFAULT_LOCALE']!r} is not in LOCALES")

    @app.url_value_preprocessor
    def pull_locale(endpoint, values):
        if not values or "locale" not in values:
            return
        locale = values.pop("locale")
        if locale not in app.config["LOCALES"]:
            abort(404)
        set_request_locale(locale)

    @app.url_defaults
    def add_locale(endpoint, values):
        if "locale" in values or not endpoint:
            return
        try:
            expects_locale = app.url_map.is_endpoint_expecting(endpoint, "locale")
        except KeyError:
            return
        if expects_locale:
            values["locale"] = get_request_locale()

    @app.get("/")
    def root():
        return redirect(url_for("account.account_home", locale=negotiate_locale()))

    @app.context_processor
    def inject_locale():
        return {"locale": get_request_locale(), "locales": app.config["LOCALES"]}
