"""
Catalog Store interface

The catalog store owns every Subject and Article. Backends hand out copies
only, assign sequential ids that are never reused, and keep each subject's
``article_count`` in step with article creation.

Known, preserved behaviour: ``article_count`` is incremented when an article
is created and is never decremented, neither when the article is deleted nor
when an update moves it to another subject.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from multilingua.exceptions import ValidationError
from multilingua.schemas import (
    CANONICAL_LANGUAGE,
    ArticleCreate,
    ArticleResponse,
    ArticleUpdate,
    SubjectCreate,
    SubjectResponse,
    TranslationContent,
    language_divergence,
)
from multilingua.schemas.validators import utcnow

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def validate_input(schema: type[SchemaT], data: SchemaT | Mapping[str, Any]) -> SchemaT:
    """Coerce plain input data into ``schema``.

    Pydantic failures are re-raised as the catalog's ValidationError so
    callers only ever deal with one error taxonomy.
    """
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        errors = [
            {
                "field": ".".join(str(loc) for loc in error["loc"]),
                "message": error["msg"],
                "type": error["type"],
            }
            for error in exc.errors()
        ]
        raise ValidationError(
            f"Invalid {schema.__name__} payload",
            details={"validation_errors": errors},
        ) from exc


def _dump_translations(translations: Mapping[str, TranslationContent]) -> dict[str, dict[str, Any]]:
    return {
        code: TranslationContent.model_validate(entry.model_dump()).model_dump()
        for code, entry in translations.items()
    }


def _warn_on_divergence(slug: str, translations: dict[str, dict], available: list[str]) -> None:
    entries = {code: TranslationContent.model_validate(entry) for code, entry in translations.items()}
    missing, unlisted = language_divergence(entries, available)
    if missing or unlisted:
        logger.warning(
            "Language data mismatch on article %s: listed without content=%s, complete but unlisted=%s",
            slug,
            missing,
            unlisted,
        )


def build_article_fields(data: ArticleCreate, now: datetime | None = None) -> dict[str, Any]:
    """Column values for a new article, with the 'en' mirrors filled in."""
    translations = _dump_translations(data.translations)
    canonical = translations[CANONICAL_LANGUAGE]
    available = list(data.available_languages or translations)
    _warn_on_divergence(data.slug, translations, available)
    return {
        "slug": data.slug,
        "subject_id": data.subject_id,
        "title": canonical["title"],
        "excerpt": canonical["excerpt"],
        "content": canonical["content"],
        "author": data.author,
        "author_image": data.author_image,
        "image_url": data.image_url,
        "read_time": data.read_time,
        "publish_date": data.publish_date or now or utcnow(),
        "featured": data.featured,
        "view_count": data.view_count,
        "translations": translations,
        "available_languages": available,
    }


def merge_article_patch(current: ArticleResponse, patch: ArticleUpdate) -> dict[str, Any]:
    """Compute the column changes an update applies to ``current``.

    Translation entries in the patch replace the stored entry for that
    language, ``None`` removes it, untouched languages are kept. When the
    patch does not set ``available_languages`` the display list follows the
    translation changes: removed languages are dropped, new ones appended.
    """
    changes: dict[str, Any] = {}
    for field in patch.model_fields_set - {"translations", "available_languages"}:
        changes[field] = getattr(patch, field)

    translations = _dump_translations(current.translations)
    available = list(current.available_languages)

    if "translations" in patch.model_fields_set:
        for code, entry in patch.translations.items():
            if entry is None:
                translations.pop(code, None)
                if code in available:
                    available.remove(code)
            else:
                if code not in translations and code not in available:
                    available.append(code)
                translations[code] = TranslationContent.model_validate(entry.model_dump()).model_dump()

        canonical = TranslationContent.model_validate(translations.get(CANONICAL_LANGUAGE) or {})
        if not canonical.is_complete():
            raise ValidationError(
                f"The '{CANONICAL_LANGUAGE}' translation must have a title, excerpt and content",
                field=f"translations.{CANONICAL_LANGUAGE}",
            )
        changes["translations"] = translations
        changes["title"] = canonical.title
        changes["excerpt"] = canonical.excerpt
        changes["content"] = canonical.content

    if "available_languages" in patch.model_fields_set:
        available = list(patch.available_languages)

    if "translations" in changes or "available_languages" in patch.model_fields_set:
        changes["available_languages"] = available
        _warn_on_divergence(changes.get("slug", current.slug), translations, available)

    return changes


class CatalogStore(ABC):
    """Storage boundary for subjects and articles.

    Write operations raise the typed errors from ``multilingua.exceptions``
    and either fully apply or leave the store untouched. Simple lookups
    return ``None`` for missing entities.
    """

    # ── Subjects ──────────────────────────────────────────────────────────────

    @abstractmethod
    async def create_subject(self, data: SubjectCreate | Mapping[str, Any]) -> SubjectResponse:
        """Store a new subject with ``article_count = 0``.

        Raises:
            ValidationError: malformed input.
            ConflictError: the slug is already used by another subject.
        """

    @abstractmethod
    async def get_subject(self, subject_id: int) -> SubjectResponse | None: ...

    @abstractmethod
    async def get_subject_by_slug(self, slug: str) -> SubjectResponse | None: ...

    @abstractmethod
    async def list_subjects(self) -> list[SubjectResponse]:
        """All subjects in insertion order."""

    # ── Articles ──────────────────────────────────────────────────────────────

    @abstractmethod
    async def create_article(self, data: ArticleCreate | Mapping[str, Any]) -> ArticleResponse:
        """Store a new article and increment its subject's ``article_count``.

        Raises:
            ValidationError: malformed input or a missing/incomplete 'en' translation.
            SubjectNotFoundError: ``subject_id`` does not reference a stored subject.
            ConflictError: the slug is already used by another article.
        """

    @abstractmethod
    async def update_article(self, article_id: int, patch: ArticleUpdate | Mapping[str, Any]) -> ArticleResponse:
        """Apply a partial update (see ``merge_article_patch``).

        The subject article counts are left as they are when ``subject_id``
        changes.

        Raises:
            ValidationError: malformed patch.
            ArticleNotFoundError: unknown ``article_id``.
            SubjectNotFoundError: the patch moves the article to an unknown subject.
            ConflictError: the new slug is used by another article.
        """

    @abstractmethod
    async def delete_article(self, article_id: int) -> None:
        """Remove an article; its subject's ``article_count`` is not decremented.

        Raises:
            ArticleNotFoundError: unknown ``article_id``.
        """

    @abstractmethod
    async def get_article(self, article_id: int) -> ArticleResponse | None: ...

    @abstractmethod
    async def get_article_by_slug(self, slug: str) -> ArticleResponse | None: ...

    @abstractmethod
    async def list_articles(
        self,
        *,
        subject_id: int | None = None,
        featured: bool | None = None,
    ) -> list[ArticleResponse]:
        """Articles in insertion order, optionally filtered."""

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    async def initialize(self) -> None:
        """Prepare the backend (create tables, open connections)."""

    async def close(self) -> None:
        """Release backend resources."""
