"""Admin session endpoints backing the inline editing mode.

Routes:
    POST /api/admin/login    {login, password} -> opens an admin session
    POST /api/admin/logout   -> closes it
    GET  /api/admin/session  -> {admin: bool}
"""
from __future__ import annotations

from typing import Any

from flask import Blueprint, request

from conference_site.routes.responses import json_error, json_ok
from conference_site.utils.identity import (
    is_admin_user,
    login_admin,
    logout_admin,
    normalize_login,
    verify_admin_credentials,
)
from conference_site.utils.logging import get_logger

bp = Blueprint("admin_session", __name__, url_prefix="/api/admin")
LOG = get_logger("admin_session")


@bp.route("/login", methods=["POST"])
def login():
    payload = request.get_json(silent=True) or {}
    if not isinstance(payload, dict):
        return json_error("invalid_payload", 400)
    login_value = payload.get("login")
    if not verify_admin_credentials(login_value, payload.get("password")):
        LOG.warning("Admin login failed login=%s remote=%s", normalize_login(login_value), request.remote_addr)
        return json_error("invalid_credentials", 401)
    login_admin(login_value)
    LOG.info("Admin login succeeded login=%s", normalize_login(login_value))
    return json_ok({"admin": True})


@bp.route("/logout", methods=["POST"])
def logout():
    logout_admin()
    return json_ok({"admin": False})


@bp.route("/session", methods=["GET"])
def session_state():
    return json_ok({"admin": is_admin_user()})


def register_admin_session(app: Any) -> None:
    if getattr(app, "_admin_session_bp", None):  # idempotent
        return
    app.register_blueprint(bp)
    setattr(app, "_admin_session_bp", bp)
    LOG.debug("admin session blueprint registered")


__all__ = ["register_admin_session"]
