"""Tests for the content persistence gateway."""
from __future__ import annotations

import json

import pytest

from conference_site.kvstore import MemoryKeyValueStore, StoreError
from conference_site.services import (
    PersistenceError,
    default_content,
    normalize_content,
    read_site_content,
    write_site_content,
)


class FailingStore:
    def get(self, key):
        raise StoreError("down")

    def set(self, key, value):
        raise StoreError("down")

    def ping(self):
        return False


@pytest.fixture
def store():
    return MemoryKeyValueStore()


def test_read_missing_key_returns_defaults(store):
    assert read_site_content(store) == default_content()
    assert store.get("site-content") is None


def test_write_then_read_round_trip(store):
    raw = {
        "programDays": [{"date": " 1 декабря ", "sessions": [{"time": "10:00", "type": "Доклад",
                                                             "title": "Старт", "description": "Вводная"}]}],
        "speakers": [{"name": "Ольга", "tags": []}],
    }
    written = write_site_content(store, raw)
    assert written == normalize_content(raw)
    assert read_site_content(store) == normalize_content(raw)


def test_write_persists_normalized_json_under_key(store):
    write_site_content(store, {"contactSection": {"email": "hi@example.org"}}, key="custom-key")
    stored = json.loads(store.get("custom-key"))
    assert stored["contactSection"]["email"] == "hi@example.org"
    assert stored["programDays"] == default_content()["programDays"]


def test_write_returns_independent_copy(store):
    written = write_site_content(store, default_content())
    written["speakers"][0]["name"] = "Изменено локально"
    assert read_site_content(store)["speakers"][0]["name"] == default_content()["speakers"][0]["name"]


def test_repeated_identical_writes_store_identical_state(store):
    write_site_content(store, default_content())
    first = store.get("site-content")
    write_site_content(store, default_content())
    assert store.get("site-content") == first


def test_legacy_stored_document_is_migrated_on_read(store):
    legacy = default_content()
    legacy.pop("registrationNotifications")
    legacy.update(discountTitle="Скидка студентам", discountText="50% по студенческому")
    store.set("site-content", json.dumps(legacy, ensure_ascii=False))
    content = read_site_content(store)
    assert content["registrationNotifications"] == {
        "title": "Скидка студентам",
        "items": ["50% по студенческому"],
    }


def test_corrupt_stored_value_falls_back_to_defaults(store):
    store.set("site-content", "{not json")
    assert read_site_content(store) == default_content()


def test_store_failures_raise_persistence_error():
    with pytest.raises(PersistenceError):
        read_site_content(FailingStore())
    with pytest.raises(PersistenceError):
        write_site_content(FailingStore(), default_content())
