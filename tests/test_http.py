# tests/test_http.py
from __future__ import annotations

import pytest
import requests

import src.api.http as http
from src.api.errors import FetchError


class DummyResp:
    def __init__(self, status: int = 200, payload=None, bad_json: bool = False):
        self.status_code = status
        self._payload = payload if payload is not None else {}
        self._bad_json = bad_json

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if self._bad_json:
            raise ValueError("not json")
        return self._payload


@pytest.fixture
def reported(monkeypatch):
    captured: list[tuple[str, str]] = []
    monkeypatch.setattr(http, "report_error", lambda ctx, e: captured.append((ctx, str(e))))
    return captured


def test_http_get_json_success_passes_params(monkeypatch):
    calls = {}

    def fake_get(url, params=None, timeout=None, headers=None):
        calls.update(url=url, params=params, timeout=timeout, headers=headers)
        return DummyResp(payload={"value": 123})

    monkeypatch.setattr(http.requests, "get", fake_get)

    out = http.http_get_json("https://api.test", params={"q": "x"}, timeout=3.0)

    assert out == {"value": 123}
    assert calls["params"] == {"q": "x"}
    assert calls["timeout"] == 3.0
    assert "User-Agent" in calls["headers"]


def test_http_get_json_does_not_retry(monkeypatch, reported):
    calls = {"n": 0}

    def fake_get(*a, **k):
        calls["n"] += 1
        return DummyResp(status=503)

    monkeypatch.setattr(http.requests, "get", fake_get)

    with pytest.raises(FetchError):
        http.http_get_json("https://api.test")

    assert calls["n"] == 1
    assert reported and "http_get_json:" in reported[0][0]


def test_http_get_json_network_error_becomes_fetch_error(monkeypatch, reported):
    def boom(*a, **k):
        raise requests.ConnectionError("no route")

    monkeypatch.setattr(http.requests, "get", boom)

    with pytest.raises(FetchError) as exc:
        http.http_get_json("https://api.test")

    assert str(exc.value) == "Weather fetch failed."
    assert "no route" in reported[0][1]


def test_http_get_json_bad_json(monkeypatch, reported):
    monkeypatch.setattr(http.requests, "get", lambda *a, **k: DummyResp(bad_json=True))

    with pytest.raises(FetchError):
        http.http_get_json("https://api.test")


def test_http_get_json_rejects_non_object(monkeypatch, reported):
    monkeypatch.setattr(http.requests, "get", lambda *a, **k: DummyResp(payload=[1, 2, 3]))

    with pytest.raises(FetchError):
        http.http_get_json("https://api.test")

    assert "expected JSON object" in reported[0][1]
