"""Utility helpers."""
from .identity import (
    normalize_login,
    verify_admin_credentials,
    login_admin,
    logout_admin,
    is_admin_user,
    ensure_admin,
    PermissionError,
)

__all__ = [
    "normalize_login",
    "verify_admin_credentials",
    "login_admin",
    "logout_admin",
    "is_admin_user",
    "ensure_admin",
    "PermissionError",
]
