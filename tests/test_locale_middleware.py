"""Tests for the locale negotiation middleware and request helpers."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

from accept_language.helpers.locale_middleware import (
    LocaleNegotiationMiddleware,
    get_request_locale,
    negotiate_request,
    require_request_locale,
)
from accept_language.models.exceptions import (
    NotAcceptableException,
    ValidationException,
)
from accept_language.models.schemas import MatchOptions, MatchOutcome, MatchResult
from accept_language.services.locale_service import LocaleService


def make_request(accept_language=None, **state):
    """Build a request double with the given header and request.state."""
    request = MagicMock()
    request.headers = {}
    if accept_language is not None:
        request.headers["Accept-Language"] = accept_language
    request.state = SimpleNamespace(**state)
    return request


def make_app(**middleware_options) -> FastAPI:
    app = FastAPI()
    app.add_middleware(LocaleNegotiationMiddleware, **middleware_options)

    @app.get("/state")
    def state(request: Request) -> dict:
        return {
            "locale": request.state.locale,
            "outcome": request.state.locale_match.outcome.value,
        }

    @app.get("/dependency")
    def dependency(locale: str = Depends(get_request_locale)) -> dict:
        return {"locale": locale}

    return app


class TestNegotiateRequest:
    """Test cases for negotiate_request function."""

    def test_uses_settings_locales(self):
        request = make_request("fr-CA,en;q=0.5")
        result = negotiate_request(request)
        assert result.locale == "fr-CA"

    def test_explicit_locales(self):
        request = make_request("fr-CA,en;q=0.5")
        result = negotiate_request(request, ["en", "fr"], loose=True)
        assert result.locale == "fr"

    def test_missing_header_is_no_match(self):
        result = negotiate_request(make_request())
        assert result.outcome == MatchOutcome.NO_MATCH

    def test_reuses_stored_result(self):
        stored = MatchResult(outcome=MatchOutcome.MATCH, locale="de")
        request = make_request("fr-CA", locale_match=stored)
        assert negotiate_request(request) is stored

    def test_explicit_locales_ignore_stored_result(self):
        stored = MatchResult(outcome=MatchOutcome.MATCH, locale="de")
        request = make_request("fr-CA", locale_match=stored)
        assert negotiate_request(request, ["fr-CA"]).locale == "fr-CA"

    def test_explicit_loose_ignores_stored_result(self):
        """A strict result stored by the middleware does not answer a loose call."""
        stored = LocaleService.negotiate(["en-US", "de"], "de-AT")
        request = make_request("de-AT", locale_match=stored)
        assert stored.outcome == MatchOutcome.NO_MATCH
        assert negotiate_request(request, loose=True).locale == "de"

    def test_explicit_strict_ignores_stored_result(self):
        stored = LocaleService.negotiate(["de"], "de-AT", MatchOptions(loose=True))
        request = make_request("de-AT", locale_match=stored)
        assert stored.locale == "de"
        assert negotiate_request(request, ["de"], loose=False).outcome == (
            MatchOutcome.NO_MATCH
        )


class TestGetRequestLocale:
    """Test cases for get_request_locale function."""

    def test_state_locale_wins(self):
        request = make_request("fr-CA", locale="de")
        assert get_request_locale(request) == "de"

    def test_negotiates_without_middleware(self):
        assert get_request_locale(make_request("zh-TW,en;q=0.1")) == "zh-Hant-TW"

    def test_falls_back_to_default(self):
        assert get_request_locale(make_request("ko-KR")) == "en-US"


class TestRequireRequestLocale:
    """Test cases for require_request_locale function."""

    def test_returns_match(self):
        assert require_request_locale(make_request("de-AT,de;q=0.9")) == "de"

    def test_raises_without_match(self):
        with pytest.raises(NotAcceptableException) as exc_info:
            require_request_locale(make_request("ko-KR"))
        assert exc_info.value.accept_language == "ko-KR"
        assert "ko-KR" in exc_info.value.message


class TestLocaleNegotiationMiddleware:
    """Test cases for LocaleNegotiationMiddleware."""

    def test_sets_request_state(self):
        client = TestClient(make_app())
        response = client.get("/state", headers={"Accept-Language": "fr-CA"})
        assert response.json() == {"locale": "fr-CA", "outcome": "match"}

    def test_content_language_header(self):
        client = TestClient(make_app())
        response = client.get("/state", headers={"Accept-Language": "fr-CA"})
        assert response.headers["Content-Language"] == "fr-CA"

    def test_fallback_to_default_locale(self):
        client = TestClient(make_app())
        response = client.get("/state", headers={"Accept-Language": "ko-KR"})
        assert response.json() == {"locale": "en-US", "outcome": "no_match"}
        assert response.headers["Content-Language"] == "en-US"

    def test_no_header(self):
        client = TestClient(make_app())
        response = client.get("/state")
        assert response.json()["locale"] == "en-US"

    def test_custom_locales_and_default(self):
        client = TestClient(make_app(supported_locales=["es", "pt"], default_locale="pt"))
        response = client.get("/state", headers={"Accept-Language": "es-MX,pt;q=0.5"})
        assert response.json()["locale"] == "pt"

    def test_loose_matching(self):
        client = TestClient(
            make_app(supported_locales=["es", "pt"], default_locale="es", loose=True)
        )
        response = client.get("/state", headers={"Accept-Language": "es-MX,pt;q=0.5"})
        assert response.json()["locale"] == "es"

    def test_content_language_disabled(self):
        client = TestClient(make_app(set_content_language=False))
        response = client.get("/state", headers={"Accept-Language": "fr-CA"})
        assert "Content-Language" not in response.headers

    def test_dependency_reads_middleware_state(self):
        client = TestClient(make_app(supported_locales=["it"], default_locale="it"))
        response = client.get("/dependency", headers={"Accept-Language": "fr"})
        assert response.json() == {"locale": "it"}

    def test_empty_supported_locales_rejected(self):
        with pytest.raises(ValidationException):
            LocaleNegotiationMiddleware(MagicMock(), supported_locales=[])

    def test_default_locale_must_be_supported(self):
        with pytest.raises(ValidationException, match="default_locale"):
            LocaleNegotiationMiddleware(
                MagicMock(), supported_locales=["es", "pt"], default_locale="en"
            )

    def test_default_locale_compared_case_insensitively(self):
        middleware = LocaleNegotiationMiddleware(
            MagicMock(), supported_locales=["pt-BR"], default_locale="pt-br"
        )
        assert middleware.default_locale == "pt-br"
