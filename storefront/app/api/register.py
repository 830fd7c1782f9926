from flask import Flask

from storefront.modules.account.routes import bp as account_bp
from storefront.modules.actions.routes import bp as actions_bp
from storefront.modules.auth.routes import bp as auth_bp
from storefront.modules.register.routes import bp as register_bp

LOCALE_PREFIX = "/<locale>"


def register_page_blueprints(app: Flask) -> None:
    app.register_blueprint(auth_bp, url_prefix=LOCALE_PREFIX)
    app.register_blueprint(register_bp, url_prefix=LOCALE_PREFIX)
    app.register_blueprint(account_bp, url_prefix=LOCALE_PREFIX)


def register_api_blueprints(app: Flask) -> None:
    app.register_blueprint(actions_bp, url_prefix="/api")

    # Root API document
    @app.get("/api")
    def api_index():
        return {
            "name": "Storefront actions API",
            "version": "0.1.0",
            "endpoints": {
                "actions": [
                    "/actions/register-customer",
                    "/actions/update-customer",
                    "/actions/change-password",
                ],
            },
        }, 200
