"""Application configuration accessors.

Centralizes environment variable parsing & defaults. The REST store reuses
the variable names of the hosted KV service (KV_REST_API_URL /
KV_REST_API_TOKEN) so existing deployments keep working unchanged.
"""
from __future__ import annotations

import os
import secrets
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

APP_NAME = "conference_site"
APP_VERSION = "0.4.0"
APP_DESCRIPTION = "Conference landing page content API"

DEFAULT_DB_PATH = "conference_site.db"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_CONTENT_KEY = "site-content"
DEFAULT_STORE_BACKEND = "sql"
DEFAULT_HTTP_TIMEOUT = 10.0
STORE_BACKENDS = ("sql", "rest", "memory")
_TRUE = {"1", "true", "yes", "on"}


def _raw_env(name: str, default: str | None = None) -> str | None:
    val = os.getenv(name)
    return val if val is not None else default


def _stripped_env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def env_bool(name: str, default: bool = False) -> bool:
    raw = _raw_env(name, str(default).lower())
    if raw is None:
        return default
    return raw.lower() in _TRUE


def log_level_name() -> str:
    return _raw_env("CONFERENCE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()  # type: ignore[union-attr]


def get_db_path() -> str:
    return _raw_env("CONFERENCE_DB_PATH", DEFAULT_DB_PATH)  # type: ignore[return-value]


def store_backend() -> str:
    value = (_raw_env("CONFERENCE_STORE_BACKEND", DEFAULT_STORE_BACKEND) or "").strip().lower()
    if value not in STORE_BACKENDS:
        raise ValueError(f"Unsupported CONFERENCE_STORE_BACKEND: {value!r}")
    return value


def content_key() -> str:
    return _stripped_env("CONFERENCE_CONTENT_KEY") or DEFAULT_CONTENT_KEY


def kv_rest_api_url() -> Optional[str]:
    """Base URL of the hosted KV REST API (no default)."""
    return _stripped_env("KV_REST_API_URL")


def kv_rest_api_token() -> Optional[str]:
    return _stripped_env("KV_REST_API_TOKEN")


def http_timeout() -> float:
    raw = _stripped_env("CONFERENCE_HTTP_TIMEOUT")
    if raw is None:
        return DEFAULT_HTTP_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        return DEFAULT_HTTP_TIMEOUT


@lru_cache(maxsize=1)
def _generated_secret() -> str:
    return secrets.token_hex(32)


def secret_key() -> str:
    """Flask session signing key.

    Environment Variable: CONFERENCE_SECRET_KEY
    Falls back to a per-process random value, which logs admins out on
    every restart and breaks sessions across multiple workers.
    """
    return _stripped_env("CONFERENCE_SECRET_KEY") or _generated_secret()


def require_admin() -> bool:
    """Whether PUT /api/content requires an admin session (default on)."""
    return env_bool("CONFERENCE_REQUIRE_ADMIN", default=True)


def admin_login() -> str:
    return _stripped_env("CONFERENCE_ADMIN_LOGIN") or "admin"


def admin_password_hash() -> Optional[str]:
    """Werkzeug password hash for the admin account.

    Environment Variable: CONFERENCE_ADMIN_PASSWORD_HASH
    No default: admin login is refused until a hash is configured.
    """
    return _stripped_env("CONFERENCE_ADMIN_PASSWORD_HASH")


@dataclass(frozen=True)
class StoreSettings:
    backend: str
    content_key: str
    db_path: str
    rest_url: Optional[str]
    rest_token: Optional[str]
    timeout: float


def store_settings() -> StoreSettings:
    return StoreSettings(
        backend=store_backend(),
        content_key=content_key(),
        db_path=get_db_path(),
        rest_url=kv_rest_api_url(),
        rest_token=kv_rest_api_token(),
        timeout=http_timeout(),
    )


@lru_cache(maxsize=1)
def metadata() -> dict:
    return {
        "name": APP_NAME,
        "version": APP_VERSION,
        "description": APP_DESCRIPTION,
    }


def summarize_runtime_config() -> dict:
    return {
        "store_backend": store_backend(),
        "content_key": content_key(),
        "db_path": get_db_path(),
        "log_level": log_level_name(),
        "require_admin": require_admin(),
    }


__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "APP_DESCRIPTION",
    "DEFAULT_CONTENT_KEY",
    "StoreSettings",
    "env_bool",
    "log_level_name",
    "get_db_path",
    "store_backend",
    "content_key",
    "kv_rest_api_url",
    "kv_rest_api_token",
    "http_timeout",
    "secret_key",
    "require_admin",
    "admin_login",
    "admin_password_hash",
    "store_settings",
    "metadata",
    "summarize_runtime_config",
]
