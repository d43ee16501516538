"""
FastAPI endpoint tests for the Verbalizer API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

import asyncio

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from verbalizer import config
from verbalizer.exceptions import UnsupportedLanguageError

client = TestClient(app)


@pytest.fixture(scope="module", autouse=True)
def _default_language() -> None:
    """Set the default language once for all API tests (bypasses lifespan)."""
    api._default_language = "en"
    yield  # type: ignore[misc]
    api._default_language = None


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["default_language"] == "en"
        assert data["languages_loaded"] == 15

    def test_not_initialised_returns_503(self) -> None:
        api._default_language = None
        try:
            assert client.get("/health").status_code == 503
        finally:
            api._default_language = "en"


class TestConvertEndpoint:
    def test_convert_text_value(self) -> None:
        resp = client.post("/convert", json={"value": "1234", "language": "en"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["words"] == "One Thousand Two Hundred Thirty-Four"
        assert data["language"] == "en"
        assert data["value"] == "1234"
        assert data["special"] is None

    def test_default_language_used_when_omitted(self) -> None:
        data = client.post("/convert", json={"value": 1000}).json()
        assert data["language"] == "en"
        assert data["words"] == "One Thousand"

    def test_json_float(self) -> None:
        data = client.post("/convert", json={"value": 1.5, "language": "en"}).json()
        assert data["words"] == "One point Five"

    def test_other_language(self) -> None:
        data = client.post("/convert", json={"value": "100000", "language": "zh-CN"}).json()
        assert data["words"] == "十万"

    def test_large_text_value_is_exact(self) -> None:
        data = client.post("/convert", json={"value": "123456789012345678901", "language": "en"}).json()
        assert data["words"].startswith("One Hundred Twenty-Three Quintillion")
        assert data["words"].endswith("Nine Hundred One")

    def test_zero_reports_special(self) -> None:
        data = client.post("/convert", json={"value": 0, "language": "fr"}).json()
        assert data["words"] == "Zéro"
        assert data["special"] == "ZERO"

    def test_invalid_number_is_not_an_error(self) -> None:
        resp = client.post("/convert", json={"value": "abc", "language": "en"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["words"] == "Invalid Number"
        assert data["special"] == "INVALID"

    def test_infinity(self) -> None:
        data = client.post("/convert", json={"value": "-Infinity", "language": "en"}).json()
        assert data["words"] == "Negative Infinity"
        assert data["special"] == "NEGATIVE_INFINITY"


class TestConvertAllEndpoint:
    def test_all_languages_by_default(self) -> None:
        data = client.post("/convert/all", json={"value": "7"}).json()
        assert len(data["results"]) == 15
        assert data["results"]["en"] == "Seven"

    def test_selected_languages(self) -> None:
        data = client.post("/convert/all", json={"value": 21, "languages": ["fr", "de"]}).json()
        assert data["results"] == {"fr": "vingt et un", "de": "einundzwanzig"}

    def test_unsupported_language_returns_400(self) -> None:
        resp = client.post("/convert/all", json={"value": 1, "languages": ["en", "xx"]})
        assert resp.status_code == 400


class TestLanguagesEndpoint:
    def test_lists_fifteen_languages(self) -> None:
        data = client.get("/languages").json()
        assert len(data) == 15
        assert {"code", "name", "grouping_width"} <= set(data[0])

    def test_sorted_by_name(self) -> None:
        names = [item["name"] for item in client.get("/languages").json()]
        assert names == sorted(names)


class TestRequestValidation:
    def test_empty_body_returns_422(self) -> None:
        resp = client.post("/convert", json={})
        assert resp.status_code == 422

    def test_missing_content_type_returns_422(self) -> None:
        resp = client.post("/convert")
        assert resp.status_code == 422

    def test_unsupported_language_returns_400(self) -> None:
        resp = client.post("/convert", json={"value": 5, "language": "xx"})
        assert resp.status_code == 400
        detail = resp.json()["detail"]
        assert detail["code"] == "UNSUPPORTED_LANGUAGE"
        assert "en" in detail["details"]["supported"]


class TestLifespan:
    def test_default_language_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv(config.DEFAULT_LANGUAGE_ENV, "de")
        try:
            with TestClient(app) as started:
                assert started.get("/health").json()["default_language"] == "de"
                assert started.post("/convert", json={"value": 2}).json()["words"] == "zwei"
        finally:
            api._default_language = "en"

    def test_unsupported_default_language_fails_startup(self, monkeypatch) -> None:
        monkeypatch.setenv(config.DEFAULT_LANGUAGE_ENV, "xx")

        async def start() -> None:
            async with api.lifespan(app):
                pass

        with pytest.raises(UnsupportedLanguageError):
            asyncio.run(start())
