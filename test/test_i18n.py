"""
Internationalization Tests

Test classes:
    TestLocaleHelpers   - RTL detection and base language tags
    TestAcceptLanguage  - Accept-Language negotiation
    TestLanguageInfo    - display metadata
    TestI18nConfig      - settings defaults
    TestLanguagesRoute  - GET /api/i18n/languages
"""

from __future__ import annotations

import pytest

from multilingua.config import settings
from multilingua.i18n import get_language_info, is_rtl_locale, parse_accept_language
from multilingua.i18n.locale import base_language

SUPPORTED = ["en", "fr", "es", "ar"]


class TestLocaleHelpers:
    @pytest.mark.parametrize("code", ["ar", "he", "fa", "ur", "ar-EG", "AR"])
    def test_rtl_locales(self, code):
        assert is_rtl_locale(code) is True

    @pytest.mark.parametrize("code", ["en", "fr", "es", "fr-CA", "xx"])
    def test_ltr_locales(self, code):
        assert is_rtl_locale(code) is False

    def test_base_language(self):
        assert base_language("fr-CA") == "fr"
        assert base_language("EN") == "en"


class TestAcceptLanguage:
    def test_exact_match(self):
        assert parse_accept_language("fr", SUPPORTED) == "fr"

    def test_region_falls_back_to_base(self):
        assert parse_accept_language("es-MX", SUPPORTED) == "es"

    def test_quality_values_rank_tags(self):
        assert parse_accept_language("de;q=0.9,ar;q=0.95,fr;q=0.5", SUPPORTED) == "ar"

    def test_zero_quality_is_refused(self):
        assert parse_accept_language("fr;q=0,en;q=0.1", SUPPORTED) == "en"

    def test_equal_weights_keep_header_order(self):
        assert parse_accept_language("es,fr", SUPPORTED) == "es"

    def test_no_supported_language(self):
        assert parse_accept_language("de,it", SUPPORTED) is None

    @pytest.mark.parametrize("header", ["", None])
    def test_empty_header(self, header):
        assert parse_accept_language(header, SUPPORTED) is None

    def test_malformed_quality_defaults_to_one(self):
        assert parse_accept_language("fr;q=abc", SUPPORTED) == "fr"


class TestLanguageInfo:
    def test_known_language(self):
        assert get_language_info("fr") == {
            "code": "fr",
            "name": "French",
            "native_name": "Français",
            "is_rtl": False,
        }

    def test_arabic_is_rtl(self):
        info = get_language_info("ar")
        assert info["name"] == "Arabic"
        assert info["is_rtl"] is True

    def test_unknown_code_uses_code(self):
        info = get_language_info("pt-br")
        assert info["name"] == "pt-br"
        assert info["native_name"] == "pt-br"


class TestI18nConfig:
    def test_default_language(self):
        assert settings.default_language == "en"

    def test_supported_languages(self):
        assert settings.supported_languages[0] == "en"
        assert set(settings.supported_languages) >= {"en", "fr", "es", "ar"}


class TestLanguagesRoute:
    def test_lists_supported_languages(self, client):
        response = client.get("/api/i18n/languages")

        assert response.status_code == 200
        data = response.json()
        assert [entry["code"] for entry in data] == settings.supported_languages
        arabic = next(entry for entry in data if entry["code"] == "ar")
        assert arabic["is_rtl"] is True
        assert arabic["native_name"] == "العربية"
