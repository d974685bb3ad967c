"""
Unit tests for request-scoped language selection
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from textbank.i18n.context import get_language, language_scope, reset_language, set_language
from textbank.i18n.middleware import install_language_middleware


class TestLanguageContext:
    def test_default_language(self):
        assert get_language() == "en"

    def test_set_and_reset(self):
        token = set_language("sv-SE")
        try:
            assert get_language() == "sv-SE"
        finally:
            reset_language(token)
        assert get_language() == "en"

    def test_scope_nests(self):
        with language_scope("de") as outer:
            assert outer == "de"
            with language_scope("fr"):
                assert get_language() == "fr"
            assert get_language() == "de"
        assert get_language() == "en"

    def test_blank_language_means_default(self):
        with language_scope("  "):
            assert get_language() == "en"

    def test_quality_suffix_is_stripped(self):
        with language_scope("sv-SE;q=0.8"):
            assert get_language() == "sv-SE"


@pytest.fixture
def client():
    app = FastAPI()
    install_language_middleware(app)

    @app.get("/language")
    def language():
        return {"language": get_language()}

    @app.get("/language-async")
    async def language_async():
        return {"language": get_language()}

    return TestClient(app)


@pytest.mark.unit
def test_middleware_uses_accept_language(client):
    resp = client.get("/language", headers={"Accept-Language": "sv-SE,sv;q=0.9,en;q=0.8"})
    assert resp.status_code == 200
    assert resp.json() == {"language": "sv-SE"}


@pytest.mark.unit
def test_middleware_respects_quality_order(client):
    resp = client.get("/language-async", headers={"Accept-Language": "en;q=0.5, de;q=0.9"})
    assert resp.json() == {"language": "de"}


@pytest.mark.unit
def test_middleware_query_parameter_beats_header(client):
    resp = client.get("/language?lang=fi", headers={"Accept-Language": "de"})
    assert resp.json() == {"language": "fi"}


@pytest.mark.unit
def test_middleware_default_without_preference(client):
    resp = client.get("/language")
    assert resp.json() == {"language": "en"}


@pytest.mark.unit
def test_middleware_resets_after_request(client):
    client.get("/language", headers={"Accept-Language": "de"})
    assert get_language() == "en"
