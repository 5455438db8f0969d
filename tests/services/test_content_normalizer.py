"""Tests for normalize_content defaulting, trimming and legacy migration."""
from __future__ import annotations

import pytest

from conference_site.services import (
    default_content,
    empty_pricing_option,
    empty_session,
    empty_speaker,
    normalize_content,
)


MALFORMED_INPUTS = [
    None,
    {},
    [],
    "not a document",
    {"programDays": []},
    {"programDays": [{}]},
    {"programDays": [{"date": "  ", "sessions": []}]},
    {"programDays": ["junk", None]},
    {"speakers": [{"tags": []}, {"tags": ["", "  ", 5]}]},
    {"pricingOptions": [{"features": None, "label": "   ", "highlight": "yes"}]},
    {"registrationNotifications": {"title": "", "items": ["", "  "]}},
    {"contactSection": {"phone": 123}},
    {"discountTitle": "Скидка", "discountText": "  10% до пятницы  "},
]


def _assert_required_collections(content):
    assert len(content["programDays"]) >= 1
    assert all(len(day["sessions"]) >= 1 for day in content["programDays"])
    assert all(len(speaker["tags"]) >= 1 for speaker in content["speakers"])
    assert all(len(option["features"]) >= 1 for option in content["pricingOptions"])
    assert len(content["registrationNotifications"]["items"]) >= 1


def test_missing_input_returns_defaults():
    assert normalize_content(None) == default_content()
    assert normalize_content({}) == default_content()


def test_default_content_is_fixed_point():
    assert normalize_content(default_content()) == default_content()


@pytest.mark.parametrize("raw", MALFORMED_INPUTS)
def test_normalize_is_idempotent(raw):
    once = normalize_content(raw)
    assert normalize_content(once) == once


@pytest.mark.parametrize("raw", MALFORMED_INPUTS)
def test_required_collections_never_empty(raw):
    _assert_required_collections(normalize_content(raw))


def test_empty_collections_fall_back_to_default_collections():
    fallback = default_content()
    result = normalize_content({"programDays": [], "speakers": [], "pricingOptions": []})
    assert result["programDays"] == fallback["programDays"]
    assert result["speakers"] == fallback["speakers"]
    assert result["pricingOptions"] == fallback["pricingOptions"]


def test_strings_are_trimmed_and_blank_fields_defaulted():
    result = normalize_content({
        "programDays": [{
            "date": "  1 декабря ",
            "sessions": [{"time": " 09:00 ", "type": "", "title": "Открытие", "description": None}],
        }],
    })
    session = result["programDays"][0]["sessions"][0]
    placeholder = empty_session()
    assert result["programDays"][0]["date"] == "1 декабря"
    assert session == {
        "time": "09:00",
        "type": placeholder["type"],
        "title": "Открытие",
        "description": placeholder["description"],
    }


def test_day_without_sessions_gets_single_placeholder_session():
    result = normalize_content({"programDays": [{"date": "День", "sessions": []}]})
    assert result["programDays"][0]["sessions"] == [empty_session()]


def test_blank_tags_and_features_are_replaced_not_dropped():
    result = normalize_content({
        "speakers": [{"name": "Ирина", "tags": ["Этика", " ", ""]}],
        "pricingOptions": [{"period": "Сейчас", "price": "1₽", "features": ["", "Чай"]}],
    })
    default_tag = empty_speaker()["tags"][0]
    default_feature = empty_pricing_option()["features"][0]
    assert result["speakers"][0]["tags"] == ["Этика", default_tag, default_tag]
    assert result["pricingOptions"][0]["features"] == [default_feature, "Чай"]


def test_optional_pricing_fields():
    result = normalize_content({
        "pricingOptions": [
            {"label": "  ", "period": "A", "price": "1", "features": ["x"]},
            {"label": " Хит ", "period": "B", "price": "2", "features": ["y"], "highlight": True},
            {"period": "C", "price": "3", "features": ["z"], "highlight": "true"},
        ],
    })
    first, second, third = result["pricingOptions"]
    assert "label" not in first
    assert first["highlight"] is False
    assert second["label"] == "Хит"
    assert second["highlight"] is True
    assert third["highlight"] is False


def test_blank_notification_items_are_dropped():
    result = normalize_content({
        "registrationNotifications": {"title": " Уведомления ", "items": ["  Письмо сразу ", "", "  "]},
    })
    assert result["registrationNotifications"] == {"title": "Уведомления", "items": ["Письмо сразу"]}


def test_all_blank_notification_items_fall_back_to_defaults():
    result = normalize_content({"registrationNotifications": {"title": "T", "items": [" ", ""]}})
    assert result["registrationNotifications"]["items"] == default_content()["registrationNotifications"]["items"]


def test_legacy_discount_fields_migrate_to_notifications():
    result = normalize_content({"discountTitle": " Скидка ", "discountText": "10% до пятницы"})
    assert result["registrationNotifications"] == {"title": "Скидка", "items": ["10% до пятницы"]}
    assert "discountTitle" not in result
    assert "discountText" not in result


def test_notifications_block_wins_over_legacy_fields():
    result = normalize_content({
        "registrationNotifications": {"title": "Новое", "items": ["Пункт"]},
        "discountTitle": "Старое",
        "discountText": "Текст",
    })
    assert result["registrationNotifications"] == {"title": "Новое", "items": ["Пункт"]}


def test_contact_section_defaults_per_field():
    fallback = default_content()["contactSection"]
    result = normalize_content({"contactSection": {"email": " team@example.org ", "phone": ""}})
    assert result["contactSection"] == {
        "title": fallback["title"],
        "phone": fallback["phone"],
        "email": "team@example.org",
        "website": fallback["website"],
    }


def test_normalize_does_not_share_state_with_input():
    raw = {"speakers": [{"name": "A", "tags": ["t"]}]}
    result = normalize_content(raw)
    result["speakers"][0]["tags"].append("extra")
    assert raw["speakers"][0]["tags"] == ["t"]
    assert normalize_content(None)["speakers"] is not normalize_content(None)["speakers"]
