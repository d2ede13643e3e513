"""Thin JSON client for the storefront backend."""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from delicassy.app.common.errors import BackendError
from delicassy.app.common.request_context import REQUEST_ID_HEADER

logger = logging.getLogger(__name__)


class ApiClient:
    """One network attempt per call; failures propagate to the caller."""

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        request_id: Optional[str] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.session.headers.update({"Accept": "application/json"})
        if request_id:
            self.session.headers.update({REQUEST_ID_HEADER: request_id})

    def get(self, path: str, params: Optional[dict] = None) -> Any:
        return self._request("GET", path, params=params)

    def post(self, path: str, body: Any) -> Any:
        return self._request("POST", path, body=body)

    def put(self, path: str, body: Any) -> Any:
        return self._request("PUT", path, body=body)

    def close(self) -> None:
        self.session.close()

    def _request(self, method: str, path: str, body: Any = None, params: Optional[dict] = None) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug("%s %s params=%s", method, url, params)

        kwargs: dict[str, Any] = {"timeout": self.timeout}
        if params:
            kwargs["params"] = params
        if body is not None:
            kwargs["json"] = body

        resp = self.session.request(method, url, **kwargs)

        if not resp.ok:
            try:
                payload = resp.json()
            except ValueError:
                payload = None
            err = BackendError.from_payload(resp.status_code, payload, resp.reason)
            logger.warning("%s %s failed: %s", method, url, err)
            raise err

        if not resp.content:
            return None
        return resp.json()
