from __future__ import annotations

from flask import Blueprint, current_app

from storefront.i18n.routing import generate_static_params

cli_bp = Blueprint("cli", __name__, cli_group=None)


@cli_bp.cli.command("locales")
def list_locales() -> None:
    """Print every locale and the pages served under it."""
    page_rules = sorted(
        rule.rule for rule in current_app.url_map.iter_rules() if "locale" in rule.arguments
    )
    for params in generate_static_params():
        marker = " (default)" if params["locale"] == current_app.config["DEFAULT_LOCALE"] else ""
        print(f"{params['locale']}{marker}")
        for rule in page_rules:
            print("  " + rule.replace("<locale>", params["locale"]))
