"""Hosted KV store client speaking the Upstash / Vercel KV REST protocol.

Wire format:
    GET  {base}/get/{key}  -> {"result": "<stored string>" | null}
    POST {base}/set/{key}  (raw value as body) -> {"result": "OK"}
    GET  {base}/ping       -> {"result": "PONG"}
Errors come back as non-2xx with {"error": "..."}. Auth is a bearer token.
"""
from __future__ import annotations

from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from conference_site.kvstore.base import StoreError
from conference_site.utils.logging import get_logger

LOG = get_logger("kvstore.rest")


class RestKeyValueStore:
    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not base_url:
            raise ValueError("KV REST base URL is required")
        if not token:
            raise ValueError("KV REST token is required")
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout
        self._session = session or requests.Session()

    def _url(self, *parts: str) -> str:
        return "/".join([self._base_url, *(quote(part, safe="") for part in parts)])

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self._token}"}

    def _result(self, response: Any, op: str, key: str) -> Any:
        try:
            data = response.json()
        except ValueError:
            data = {"raw": getattr(response, "text", "")}
        if response.status_code != 200 or not isinstance(data, dict) or "error" in data:
            LOG.warning(
                "kv %s failed key=%s status=%s details=%s", op, key, response.status_code, data
            )
            raise StoreError(f"kv {op} failed with status {response.status_code}")
        return data.get("result")

    def get(self, key: str) -> Optional[str]:
        try:
            r = self._session.get(self._url("get", key), headers=self._headers(), timeout=self._timeout)
        except requests.RequestException as exc:
            LOG.warning("kv get transport error key=%s error=%s", key, exc)
            raise StoreError("kv get transport error") from exc
        result = self._result(r, "get", key)
        if result is None or isinstance(result, str):
            return result
        raise StoreError(f"kv get returned unexpected payload type {type(result).__name__}")

    def set(self, key: str, value: str) -> None:
        try:
            r = self._session.post(
                self._url("set", key),
                data=value.encode("utf-8"),
                headers=self._headers(),
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            LOG.warning("kv set transport error key=%s error=%s", key, exc)
            raise StoreError("kv set transport error") from exc
        result = self._result(r, "set", key)
        if result != "OK":
            raise StoreError(f"kv set returned {result!r}")

    def ping(self) -> bool:
        try:
            r = self._session.get(self._url("ping"), headers=self._headers(), timeout=self._timeout)
            return self._result(r, "ping", "-") == "PONG"
        except (requests.RequestException, StoreError) as exc:
            LOG.debug("kv ping failed: %s", exc)
            return False


__all__ = ["RestKeyValueStore"]
