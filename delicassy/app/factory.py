from __future__ import annotations

import logging

import requests
from flask import Flask, render_template, session
from werkzeug.exceptions import HTTPException

from delicassy.app.config import Config
from delicassy.app.extensions import backend
from delicassy.app.common.errors import BackendError
from delicassy.app.common.request_context import current_request_id, init_request_id
from delicassy.app.router import register_views
from delicassy.app.cli import cli_bp


def _error_page(status: int, title: str, message: str):
    return (
        render_template(
            "pages/error.html",
            status=status,
            title=title,
            message=message,
            request_id=current_request_id(),
        ),
        status,
    )


def create_app(config_object: type[Config] = Config) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # Extensions
    backend.init_app(app)

    @app.before_request
    def _before_request():
        init_request_id()
        # Cart id and theme flag must survive browser restarts
        session.permanent = True

    @app.after_request
    def _after_request(resp):
        rid = current_request_id()
        if rid:
            resp.headers["X-Request-ID"] = rid
        return resp

    # Health endpoint (for Docker)
    @app.get("/health")
    def health():
        return {"status": "ok"}, 200

    register_views(app)

    # CLI (flask check-backend)
    app.register_blueprint(cli_bp)

    # Error handlers
    @app.errorhandler(BackendError)
    def handle_backend_error(err: BackendError):
        app.logger.warning("Backend call failed: %s", err)
        if err.status_code == 404:
            return _error_page(404, "Not found", err.message)
        return _error_page(502, "Something went wrong", "We couldn't reach our shop right now. Please try again.")

    @app.errorhandler(requests.RequestException)
    def handle_transport_error(err: requests.RequestException):
        app.logger.warning("Backend unreachable: %s", err)
        return _error_page(502, "Something went wrong", "We couldn't reach our shop right now. Please try again.")

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        return _error_page(err.code or 500, err.name, err.description or "")

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        app.logger.exception("Unhandled exception")
        return _error_page(500, "Internal server error", "Something unexpected happened.")

    return app
