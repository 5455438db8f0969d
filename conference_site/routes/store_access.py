"""Access to the key-value store injected into the running Flask app."""
from __future__ import annotations

from flask import current_app

from conference_site.config import DEFAULT_CONTENT_KEY
from conference_site.kvstore.base import KeyValueStore

STORE_EXTENSION = "conference_store"


def get_store() -> KeyValueStore:
    store = current_app.extensions.get(STORE_EXTENSION)
    if store is None:
        raise RuntimeError("content store is not configured on this app")
    return store


def get_content_key() -> str:
    return current_app.config.get("CONTENT_KEY") or DEFAULT_CONTENT_KEY


__all__ = ["STORE_EXTENSION", "get_store", "get_content_key"]
