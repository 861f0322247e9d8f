"""
Translation Resolver

Decides what a reader actually sees for an article in a requested language.

Functions:
    is_complete             : title, excerpt and content all non-empty
    select_language         : language code that will be served
    resolve                 : effective view for (article, language)
    language_options        : language-selector entries from available_languages
    find_language_divergence: data-quality check between the two language sources

Resolution only looks at ``translations``. The requested language is served
when its entry is complete, otherwise the 'en' entry is, whatever
``available_languages`` says. ``available_languages`` only drives which
language tabs are offered.
"""

from __future__ import annotations

import logging

from multilingua.i18n.locale import get_language_info, is_rtl_locale
from multilingua.schemas import (
    CANONICAL_LANGUAGE,
    ArticleResponse,
    EffectiveView,
    LanguageInfo,
    TranslationContent,
    language_divergence,
)

logger = logging.getLogger(__name__)


def is_complete(localized: TranslationContent | None) -> bool:
    return localized is not None and localized.is_complete()


def select_language(article: ArticleResponse, lang: str) -> str:
    """Return ``lang`` if its translation is complete, else 'en'."""
    code = (lang or "").strip().lower()
    if is_complete(article.translations.get(code)):
        return code
    return CANONICAL_LANGUAGE


def resolve(article: ArticleResponse, lang: str) -> EffectiveView:
    """Build the effective view of ``article`` for ``lang``.

    Pure: the article is not modified and repeated calls return equal views.
    Missing ``notes``/``resources`` are presented as empty lists.

    Raises:
        KeyError: the article has no 'en' translation, which the store never allows.
    """
    served = select_language(article, lang)
    localized = article.translations[served]
    return EffectiveView(
        requested_language=lang,
        language=served,
        is_fallback=served != (lang or "").strip().lower(),
        is_rtl=is_rtl_locale(served),
        title=localized.title,
        excerpt=localized.excerpt,
        content=localized.content,
        notes=list(localized.notes or []),
        resources=list(localized.resources or []),
    )


def language_options(article: ArticleResponse) -> list[LanguageInfo]:
    """Language-selector entries, in ``available_languages`` order."""
    return [LanguageInfo(**get_language_info(code)) for code in article.available_languages]


def find_language_divergence(article: ArticleResponse) -> dict[str, list[str]]:
    """Report mismatches between ``available_languages`` and ``translations``.

    Never raises; a mismatch is logged as a data-quality warning.
    """
    missing, unlisted = language_divergence(article.translations, article.available_languages)
    if missing or unlisted:
        logger.warning(
            "Article %s language mismatch: listed_without_content=%s complete_but_unlisted=%s",
            article.slug,
            missing,
            unlisted,
        )
    return {"listed_without_content": missing, "complete_but_unlisted": unlisted}
