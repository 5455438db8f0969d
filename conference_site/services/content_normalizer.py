"""Coerce arbitrary (partial, malformed, legacy) input into a complete SiteContent.

`normalize_content` is total: it never raises and always returns a document
in which every required collection is non-empty and every required string
is non-blank. It is idempotent, so normalized documents pass through
unchanged.
"""
from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

from conference_site.services.content_defaults import (
    SiteContent,
    default_content,
    empty_day,
    empty_pricing_option,
    empty_session,
    empty_speaker,
)

LEGACY_DISCOUNT_TITLE = "discountTitle"
LEGACY_DISCOUNT_TEXT = "discountText"


def _text(raw: Any) -> Optional[str]:
    if not isinstance(raw, str):
        return None
    cleaned = raw.strip()
    return cleaned or None


def _mapping(raw: Any) -> Dict[str, Any]:
    return raw if isinstance(raw, dict) else {}


def _items(raw: Any) -> List[Any]:
    if isinstance(raw, (list, tuple)):
        return list(raw)
    return []


def _normalize_session(raw: Any, fallback: Dict[str, str]) -> Dict[str, str]:
    data = _mapping(raw)
    return {field: _text(data.get(field)) or fallback[field] for field in ("time", "type", "title", "description")}


def _normalize_day(raw: Any) -> Dict[str, Any]:
    data = _mapping(raw)
    fallback_day = empty_day()
    fallback_session = empty_session()
    sessions = [_normalize_session(item, fallback_session) for item in _items(data.get("sessions"))]
    return {
        "date": _text(data.get("date")) or fallback_day["date"],
        "sessions": sessions or [empty_session()],
    }


def _normalize_speaker(raw: Any) -> Dict[str, Any]:
    data = _mapping(raw)
    fallback = empty_speaker()
    default_tag = fallback["tags"][0]
    tags = [_text(tag) or default_tag for tag in _items(data.get("tags"))]
    return {
        "name": _text(data.get("name")) or fallback["name"],
        "role": _text(data.get("role")) or fallback["role"],
        "experience": _text(data.get("experience")) or fallback["experience"],
        "description": _text(data.get("description")) or fallback["description"],
        "tags": tags or list(fallback["tags"]),
        "photoUrl": _text(data.get("photoUrl")) or fallback["photoUrl"],
    }


def _normalize_pricing_option(raw: Any) -> Dict[str, Any]:
    data = _mapping(raw)
    fallback = empty_pricing_option()
    default_feature = fallback["features"][0]
    features = [_text(feature) or default_feature for feature in _items(data.get("features"))]
    option: Dict[str, Any] = {}
    label = _text(data.get("label"))
    if label:
        option["label"] = label
    option.update({
        "period": _text(data.get("period")) or fallback["period"],
        "price": _text(data.get("price")) or fallback["price"],
        "features": features or list(fallback["features"]),
        "highlight": data.get("highlight") is True,
    })
    return option


def _registration_source(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return the notifications block, migrating the flat legacy discount fields."""
    block = data.get("registrationNotifications")
    if isinstance(block, dict):
        return block
    title = data.get(LEGACY_DISCOUNT_TITLE)
    text = data.get(LEGACY_DISCOUNT_TEXT)
    if title is None and text is None:
        return {}
    return {"title": title, "items": [text]}


def _normalize_notifications(raw: Dict[str, Any], fallback: Dict[str, Any]) -> Dict[str, Any]:
    items = [cleaned for cleaned in (_text(item) for item in _items(raw.get("items"))) if cleaned]
    return {
        "title": _text(raw.get("title")) or fallback["title"],
        "items": items or list(fallback["items"]),
    }


def _normalize_contact(raw: Any, fallback: Dict[str, str]) -> Dict[str, str]:
    data = _mapping(raw)
    return {field: _text(data.get(field)) or fallback[field] for field in ("title", "phone", "email", "website")}


def normalize_content(raw: Any) -> SiteContent:
    fallback = default_content()
    data = _mapping(raw)
    if not data:
        return fallback

    days = _items(data.get("programDays"))
    speakers = _items(data.get("speakers"))
    options = _items(data.get("pricingOptions"))
    return {
        "programDays": [_normalize_day(day) for day in days] if days else fallback["programDays"],
        "speakers": [_normalize_speaker(s) for s in speakers] if speakers else fallback["speakers"],
        "pricingOptions": (
            [_normalize_pricing_option(o) for o in options] if options else fallback["pricingOptions"]
        ),
        "registrationNotifications": _normalize_notifications(
            _registration_source(data), fallback["registrationNotifications"]
        ),
        "contactSection": _normalize_contact(data.get("contactSection"), fallback["contactSection"]),
    }


def clone_site_content(content: SiteContent) -> SiteContent:
    return copy.deepcopy(content)


__all__ = ["normalize_content", "clone_site_content"]
