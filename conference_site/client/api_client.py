"""HTTP client for the site content API used by the inline editor."""
from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from conference_site.services.content_defaults import SiteContent
from conference_site.utils.logging import get_logger

LOG = get_logger("client.api")

CONTENT_ENDPOINT = "/api/content"
LOGIN_ENDPOINT = "/api/admin/login"
LOGOUT_ENDPOINT = "/api/admin/logout"
UNKNOWN_ERROR = "Неизвестная ошибка"
NETWORK_ERROR = "Сервер недоступен"


class ContentClientError(Exception):
    """Base class for editor-facing client errors."""


class NetworkError(ContentClientError):
    """Raised when the API cannot be reached or answers with a non-JSON body."""


class ApiError(ContentClientError):
    """Raised when the API answers with an error envelope or a non-2xx status."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


class ContentApiClient:
    def __init__(
        self,
        base_url: str = "",
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = self._session.request(method, self._url(path), timeout=self._timeout, **kwargs)
        except requests.RequestException as exc:
            LOG.warning("%s %s failed: %s", method, path, exc)
            raise NetworkError(NETWORK_ERROR) from exc
        try:
            payload = response.json()
        except ValueError as exc:
            raise NetworkError(UNKNOWN_ERROR) from exc
        ok = 200 <= response.status_code < 300
        if not isinstance(payload, dict):
            raise ApiError(UNKNOWN_ERROR, response.status_code)
        if not ok or not payload.get("success"):
            message = UNKNOWN_ERROR if payload.get("success") else payload.get("error") or UNKNOWN_ERROR
            raise ApiError(str(message), response.status_code)
        return payload.get("data")

    def fetch_content(self) -> SiteContent:
        return self._request("GET", CONTENT_ENDPOINT, headers={"Cache-Control": "no-cache"})

    def save_content(self, content: SiteContent) -> SiteContent:
        return self._request("PUT", CONTENT_ENDPOINT, json=content)

    def login(self, login: str, password: str) -> Dict[str, Any]:
        return self._request("POST", LOGIN_ENDPOINT, json={"login": login, "password": password})

    def logout(self) -> Dict[str, Any]:
        return self._request("POST", LOGOUT_ENDPOINT)


__all__ = [
    "ContentClientError",
    "NetworkError",
    "ApiError",
    "ContentApiClient",
]
