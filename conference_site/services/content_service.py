"""Persistence gateway for the site content document.

The whole document lives under a single key of an injected key-value store
and is replaced wholesale on every write.
"""
from __future__ import annotations

import json
from typing import Any

from conference_site.config import DEFAULT_CONTENT_KEY
from conference_site.kvstore.base import KeyValueStore, StoreError
from conference_site.services.content_defaults import SiteContent
from conference_site.services.content_normalizer import clone_site_content, normalize_content
from conference_site.utils.logging import get_logger

LOG = get_logger("content_service")


class PersistenceError(RuntimeError):
    """Raised when the content store cannot be read or written."""


def _decode(raw: Any, key: str) -> Any:
    if raw is None or not isinstance(raw, (str, bytes)):
        return raw
    try:
        return json.loads(raw)
    except ValueError:
        LOG.warning("Stored content under key=%s is not valid JSON; falling back to defaults", key)
        return None


def read_site_content(store: KeyValueStore, key: str = DEFAULT_CONTENT_KEY) -> SiteContent:
    try:
        raw = store.get(key)
    except StoreError as exc:
        raise PersistenceError("content read failed") from exc
    return normalize_content(_decode(raw, key))


def write_site_content(
    store: KeyValueStore,
    content: Any,
    key: str = DEFAULT_CONTENT_KEY,
) -> SiteContent:
    normalized = normalize_content(content)
    encoded = json.dumps(normalized, ensure_ascii=False, separators=(",", ":"))
    try:
        store.set(key, encoded)
    except StoreError as exc:
        raise PersistenceError("content write failed") from exc
    LOG.info(
        "Site content saved key=%s days=%d speakers=%d pricing=%d",
        key,
        len(normalized["programDays"]),
        len(normalized["speakers"]),
        len(normalized["pricingOptions"]),
    )
    return clone_site_content(normalized)


__all__ = ["PersistenceError", "read_site_content", "write_site_content"]
