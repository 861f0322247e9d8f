"""
Tests for the translation resolver
"""

import logging
from datetime import datetime

import pytest

from multilingua.schemas import ArticleResponse, EffectiveView, TranslationContent
from multilingua.services import translation_service


def make_article(translations, available=None, slug="sample") -> ArticleResponse:
    en = translations.get("en", {})
    return ArticleResponse(
        id=1,
        slug=slug,
        subject_id=1,
        title=en.get("title", ""),
        excerpt=en.get("excerpt", ""),
        content=en.get("content", ""),
        author="Author",
        image_url="https://images.example.com/a.jpg",
        read_time=4,
        publish_date=datetime(2024, 1, 1),
        translations=translations,
        available_languages=available if available is not None else list(translations),
    )


EN = {"title": "Hello", "excerpt": "Short", "content": "Body", "notes": ["n1"], "resources": ["r1"]}
FR = {"title": "Bonjour", "excerpt": "Court", "content": "Corps", "notes": ["n-fr"], "resources": []}
AR = {"title": "مرحبا", "excerpt": "قصير", "content": "نص"}


class TestIsComplete:
    def test_complete(self):
        assert translation_service.is_complete(TranslationContent(**EN))

    @pytest.mark.parametrize("field", ["title", "excerpt", "content"])
    def test_empty_field(self, field):
        entry = dict(EN, **{field: ""})
        assert not translation_service.is_complete(TranslationContent(**entry))

    def test_whitespace_is_empty(self):
        assert not translation_service.is_complete(TranslationContent(title=" ", excerpt="E", content="C"))

    def test_none(self):
        assert not translation_service.is_complete(None)


class TestResolve:
    def test_requested_language_served_when_complete(self):
        article = make_article({"en": EN, "fr": FR})

        view = translation_service.resolve(article, "fr")

        assert view.language == "fr"
        assert view.is_fallback is False
        assert (view.title, view.excerpt, view.content) == ("Bonjour", "Court", "Corps")
        assert view.notes == ["n-fr"]

    def test_english_request_serves_english(self):
        article = make_article({"en": EN, "fr": FR})

        view = translation_service.resolve(article, "en")

        assert view.language == "en"
        assert view.title == "Hello"
        assert view.notes == ["n1"]
        assert view.resources == ["r1"]

    def test_english_served_even_when_not_listed(self):
        article = make_article({"en": EN, "fr": FR}, available=["fr"])

        english = translation_service.resolve(article, "en")
        unlisted = translation_service.resolve(article, "de")

        assert english.language == "en"
        assert english.is_fallback is False
        assert (english.title, english.notes) == ("Hello", ["n1"])
        assert unlisted.language == "en"
        assert unlisted.title == "Hello"

    def test_missing_language_falls_back_to_english(self):
        article = make_article({"en": EN})

        view = translation_service.resolve(article, "es")

        assert view.requested_language == "es"
        assert view.language == "en"
        assert view.is_fallback is True
        assert view.title == "Hello"

    def test_incomplete_translation_falls_back_as_a_whole(self):
        article = make_article({"en": EN, "fr": {"title": "Bonjour", "excerpt": "", "content": "Corps"}})

        view = translation_service.resolve(article, "fr")

        assert view.language == "en"
        assert (view.title, view.excerpt, view.content) == ("Hello", "Short", "Body")

    def test_available_languages_do_not_drive_resolution(self):
        article = make_article({"en": EN, "fr": FR}, available=["en"])

        assert translation_service.resolve(article, "fr").language == "fr"

        listed_only = make_article({"en": EN}, available=["en", "es"])
        assert translation_service.resolve(listed_only, "es").language == "en"

    def test_missing_notes_and_resources_become_empty_lists(self):
        article = make_article({"en": {"title": "T", "excerpt": "E", "content": "C"}})

        view = translation_service.resolve(article, "en")

        assert view.notes == []
        assert view.resources == []

    def test_request_code_is_case_insensitive(self):
        article = make_article({"en": EN, "fr": FR})

        view = translation_service.resolve(article, "FR")

        assert view.language == "fr"
        assert view.is_fallback is False

    def test_rtl_follows_served_language(self):
        article = make_article({"en": EN, "ar": AR})

        assert translation_service.resolve(article, "ar").is_rtl is True
        assert translation_service.resolve(article, "fr").is_rtl is False

    def test_resolve_is_pure_and_idempotent(self):
        article = make_article({"en": EN, "fr": FR})
        before = article.model_dump()

        first = translation_service.resolve(article, "de")
        second = translation_service.resolve(article, "de")

        assert first == second
        assert isinstance(first, EffectiveView)
        assert article.model_dump() == before

    def test_returned_lists_are_not_shared_with_article(self):
        article = make_article({"en": EN})

        view = translation_service.resolve(article, "en")
        view.notes.append("extra")

        assert article.translations["en"].notes == ["n1"]


class TestLanguageOptions:
    def test_options_follow_available_languages_order(self):
        article = make_article({"en": EN, "fr": FR, "ar": AR}, available=["ar", "en", "fr"])

        options = translation_service.language_options(article)

        assert [o.code for o in options] == ["ar", "en", "fr"]
        arabic = options[0]
        assert arabic.native_name == "العربية"
        assert arabic.is_rtl is True

    def test_unknown_language_uses_code_as_name(self):
        article = make_article({"en": EN}, available=["en", "xx"])

        options = translation_service.language_options(article)

        assert options[1].code == "xx"
        assert options[1].name == "xx"
        assert options[1].is_rtl is False


class TestLanguageDivergence:
    def test_consistent_article(self, caplog):
        article = make_article({"en": EN, "fr": FR})

        with caplog.at_level(logging.WARNING):
            report = translation_service.find_language_divergence(article)

        assert report == {"listed_without_content": [], "complete_but_unlisted": []}
        assert "language mismatch" not in caplog.text

    def test_mismatch_is_reported_and_logged(self, caplog):
        article = make_article(
            {"en": EN, "fr": FR, "es": {"title": "Hola", "excerpt": "", "content": ""}},
            available=["en", "es", "ar"],
        )

        with caplog.at_level(logging.WARNING):
            report = translation_service.find_language_divergence(article)

        assert report["listed_without_content"] == ["es", "ar"]
        assert report["complete_but_unlisted"] == ["fr"]
        assert "language mismatch" in caplog.text
