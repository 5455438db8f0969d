"""Application initialization / wiring.

Orchestrates: Flask app creation, store construction & injection, Babel,
route registration.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from flask import Flask
from flask_babel import Babel

from conference_site import config as app_config
from conference_site.kvstore import KeyValueStore, build_store
from conference_site.routes import register_all as register_routes
from conference_site.routes.store_access import STORE_EXTENSION
from conference_site.utils.logging import get_logger

LOG = get_logger("conference_site.startup")

DEFAULT_LOCALE = "ru"


def create_app(
    store: Optional[KeyValueStore] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> Flask:
    """Build the Flask app.

    `store` is injected as-is when given; otherwise one is built from the
    environment (`conference_site.config.store_settings`).
    """
    app = Flask(__name__)
    app.config.update(
        SECRET_KEY=app_config.secret_key(),
        CONTENT_KEY=app_config.content_key(),
        REQUIRE_ADMIN=app_config.require_admin(),
        BABEL_DEFAULT_LOCALE=DEFAULT_LOCALE,
        SESSION_COOKIE_HTTPONLY=True,
        SESSION_COOKIE_SAMESITE="Lax",
    )
    if overrides:
        app.config.update(overrides)
    app.json.ensure_ascii = False  # type: ignore[attr-defined]

    Babel(app)
    if store is None:
        store = build_store(app_config.store_settings())
    app.extensions[STORE_EXTENSION] = store
    register_routes(app)
    LOG.info(
        "conference_site app ready store=%s key=%s require_admin=%s",
        type(store).__name__,
        app.config["CONTENT_KEY"],
        app.config["REQUIRE_ADMIN"],
    )
    return app


__all__ = ["create_app"]
