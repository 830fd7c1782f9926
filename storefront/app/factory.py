from __future__ import annotations

import logging
from flask import Flask, g, jsonify, render_template, request
from werkzeug.exceptions import HTTPException

from storefront.app.config import Config
from storefront.app.extensions import client, cors
from storefront.app.common.errors import ApiError, error_payload
from storefront.app.common.form_fields import init_form_fields
from storefront.app.common.request_context import REQUEST_ID_HEADER, init_request_id
from storefront.app.api.register import register_api_blueprints, register_page_blueprints
from storefront.app.cli import cli_bp
from storefront.i18n.messages import init_messages
from storefront.i18n.routing import init_locale_routing


def _wants_json() -> bool:
    return request.path.startswith("/api")


def create_app(config_object: type[Config] = Config) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # Extensions
    cors.init_app(app, resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS") or "*"}})
    client.init_app(app)

    # Locale prefix + message catalogs
    init_locale_routing(app)
    init_messages(app)
    init_form_fields(app)

    # Request id
    @app.before_request
    def _before_request():
        init_request_id()

    @app.after_request
    def _after_request(response):
        rid = g.get("request_id")
        if rid:
            response.headers[REQUEST_ID_HEADER] = rid
        return response

    # Health endpoint (for Docker)
    @app.get("/health")
    def health():
        return {"status": "ok"}, 200

    register_page_blueprints(app)
    register_api_blueprints(app)

    # CLI (flask locales)
    app.register_blueprint(cli_bp)

    # Error handlers
    @app.errorhandler(ApiError)
    def handle_api_error(err: ApiError):
        return jsonify(err.to_dict(g.get("request_id"))), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        if _wants_json():
            payload = error_payload("http_error", err.description, g.get("request_id"), {"name": err.name})
            return jsonify(payload), err.code or 500
        if err.code == 404:
            return render_template("errors/404.html"), 404
        return err

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        app.logger.exception("Unhandled exception")
        if _wants_json():
            return jsonify(error_payload("internal_error", "Internal server error", g.get("request_id"))), 500
        return render_template("errors/500.html"), 500

    return app
