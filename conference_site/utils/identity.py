"""Admin identity & permission helpers backed by the Flask session."""
from __future__ import annotations

from typing import Any, Optional

from flask import session
from werkzeug.security import check_password_hash

from conference_site import config as app_config
from conference_site.utils.logging import get_logger

LOG = get_logger("identity")

SESSION_ADMIN_KEY = "is_admin"
SESSION_LOGIN_KEY = "admin_login"


def normalize_login(raw: Any) -> Optional[str]:
    if not isinstance(raw, str):
        return None
    cleaned = raw.strip().lower()
    return cleaned or None


def verify_admin_credentials(login: Any, password: Any) -> bool:
    expected_login = normalize_login(app_config.admin_login())
    password_hash = app_config.admin_password_hash()
    if not password_hash:
        LOG.warning("Admin login refused: CONFERENCE_ADMIN_PASSWORD_HASH is not configured")
        return False
    if normalize_login(login) != expected_login or not isinstance(password, str) or not password:
        return False
    try:
        return check_password_hash(password_hash, password)
    except ValueError:
        LOG.error("Configured admin password hash is malformed")
        return False


def login_admin(login: str) -> None:
    session.clear()
    session[SESSION_ADMIN_KEY] = True
    session[SESSION_LOGIN_KEY] = normalize_login(login)


def logout_admin() -> None:
    session.pop(SESSION_ADMIN_KEY, None)
    session.pop(SESSION_LOGIN_KEY, None)


def is_admin_user() -> bool:
    return bool(session.get(SESSION_ADMIN_KEY, False))


class PermissionError(Exception):
    pass


def ensure_admin() -> None:
    if not is_admin_user():
        raise PermissionError("Admin privileges required")


__all__ = [
    "SESSION_ADMIN_KEY",
    "normalize_login",
    "verify_admin_credentials",
    "login_admin",
    "logout_admin",
    "is_admin_user",
    "ensure_admin",
    "PermissionError",
]
