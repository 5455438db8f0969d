"""Key-value store backends and the factory selecting one from settings."""
from __future__ import annotations

from conference_site.config import StoreSettings
from conference_site.db.engine import create_sqlite_engine

from .base import KeyValueStore, MemoryKeyValueStore, StoreError
from .rest_store import RestKeyValueStore
from .sql_store import SqlKeyValueStore


def build_store(settings: StoreSettings) -> KeyValueStore:
    if settings.backend == "rest":
        if not settings.rest_url or not settings.rest_token:
            raise ValueError("KV_REST_API_URL and KV_REST_API_TOKEN are required for the rest backend")
        return RestKeyValueStore(settings.rest_url, settings.rest_token, timeout=settings.timeout)
    if settings.backend == "memory":
        return MemoryKeyValueStore()
    return SqlKeyValueStore(create_sqlite_engine(settings.db_path))


__all__ = [
    "KeyValueStore",
    "MemoryKeyValueStore",
    "StoreError",
    "RestKeyValueStore",
    "SqlKeyValueStore",
    "build_store",
]
