"""Tests for ContentApiClient envelope handling."""
from __future__ import annotations

import pytest
import requests

from conference_site.client import ApiError, ContentApiClient, NetworkError
from conference_site.services import default_content


class DummyResp:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class DummySession:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


def _client(response):
    session = DummySession(response)
    return ContentApiClient("https://conf.example.com/", session=session, timeout=5), session


def test_fetch_content_returns_data():
    client, session = _client(DummyResp(payload={"success": True, "data": default_content()}))
    assert client.fetch_content() == default_content()
    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "https://conf.example.com/api/content"
    assert call["timeout"] == 5


def test_save_content_puts_json_body():
    content = default_content()
    client, session = _client(DummyResp(payload={"success": True, "data": content}))
    assert client.save_content(content) == content
    assert session.calls[0]["method"] == "PUT"
    assert session.calls[0]["json"] == content


def test_error_envelope_raises_api_error_with_server_message():
    client, _ = _client(DummyResp(status_code=400, payload={"success": False, "error": "Некорректные данные"}))
    with pytest.raises(ApiError) as excinfo:
        client.save_content(default_content())
    assert str(excinfo.value) == "Некорректные данные"
    assert excinfo.value.status == 400


def test_non_2xx_with_success_flag_reports_unknown_error():
    client, _ = _client(DummyResp(status_code=502, payload={"success": True, "data": {}}))
    with pytest.raises(ApiError) as excinfo:
        client.fetch_content()
    assert str(excinfo.value) == "Неизвестная ошибка"


def test_transport_failure_raises_network_error():
    client, _ = _client(requests.ConnectionError("refused"))
    with pytest.raises(NetworkError):
        client.fetch_content()


def test_non_json_body_raises_network_error():
    client, _ = _client(DummyResp(status_code=504, payload=ValueError("html")))
    with pytest.raises(NetworkError):
        client.fetch_content()


def test_login_posts_credentials():
    client, session = _client(DummyResp(payload={"success": True, "data": {"admin": True}}))
    assert client.login("organizer", "Secret123!") == {"admin": True}
    assert session.calls[0]["url"] == "https://conf.example.com/api/admin/login"
    assert session.calls[0]["json"] == {"login": "organizer", "password": "Secret123!"}
