from __future__ import annotations

from flask import Flask, current_app, g

from delicassy.app.api.client import ApiClient
from delicassy.app.common.request_context import current_request_id


class Backend:
    """Hands each request its own API client and closes it on teardown."""

    def __init__(self, app: Flask | None = None) -> None:
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        app.extensions["backend"] = self
        app.teardown_appcontext(self._teardown)

    def make_client(self) -> ApiClient:
        return ApiClient(
            current_app.config["API_BASE_URL"],
            timeout=current_app.config.get("API_TIMEOUT"),
            request_id=current_request_id(),
        )

    @property
    def client(self) -> ApiClient:
        if "api_client" not in g:
            g.api_client = self.make_client()
        return g.api_client

    def _teardown(self, exc: BaseException | None) -> None:
        client = g.pop("api_client", None)
        if client is not None:
            client.close()


# Singleton (initialized in app factory)
backend = Backend()
