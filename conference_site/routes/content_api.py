"""Site content JSON API.

Routes:
    GET /api/content  -> current (normalized) content document
    PUT /api/content  -> validate, normalize and persist a full document

PUT is restricted to admin sessions unless REQUIRE_ADMIN is disabled.
"""
from __future__ import annotations

from typing import Any

from flask import Blueprint, current_app, request

from conference_site.routes.responses import json_error, json_ok
from conference_site.routes.store_access import get_content_key, get_store
from conference_site.services import (
    ContentValidationError,
    PersistenceError,
    normalize_content,
    read_site_content,
    validate_site_content,
    write_site_content,
)
from conference_site.utils import PermissionError, ensure_admin
from conference_site.utils.logging import get_logger

bp = Blueprint("content_api", __name__, url_prefix="/api")
LOG = get_logger("content_api")


def _no_store(response_tuple):
    response, status = response_tuple
    response.headers["Cache-Control"] = "no-store"
    return response, status


def _require_admin_json():
    if not current_app.config.get("REQUIRE_ADMIN", True):
        return True
    try:
        ensure_admin()
    except PermissionError:
        LOG.warning("Rejected content update without admin session from %s", request.remote_addr)
        return json_error("admin_required", 403)
    return True


@bp.route("/content", methods=["GET"])
def get_content():
    try:
        content = read_site_content(get_store(), get_content_key())
    except PersistenceError:
        LOG.exception("Failed to read site content")
        return _no_store(json_error("load_failed", 500))
    except Exception:
        LOG.exception("Unexpected error reading site content")
        return _no_store(json_error("load_failed", 500))
    return _no_store(json_ok(content))


@bp.route("/content", methods=["PUT"])
def put_content():
    auth = _require_admin_json()
    if auth is not True:
        return auth
    payload: Any = request.get_json(silent=True)
    try:
        validated = validate_site_content(payload)
    except ContentValidationError as exc:
        LOG.warning("Invalid site content payload: %s errors=%s", exc, exc.errors)
        return json_error("invalid_payload", 400)
    try:
        saved = write_site_content(get_store(), normalize_content(validated), get_content_key())
    except PersistenceError:
        LOG.exception("Failed to update site content")
        return json_error("save_failed", 500)
    except Exception:
        LOG.exception("Unexpected error updating site content")
        return json_error("save_failed", 500)
    return json_ok(saved)


def register_content_api(app: Any) -> None:
    if getattr(app, "_content_api_bp", None):  # idempotent
        return
    app.register_blueprint(bp)
    setattr(app, "_content_api_bp", bp)
    LOG.debug("content api blueprint registered")


__all__ = ["register_content_api"]
