"""
In-memory Catalog Store

Dict-backed store for tests, demos and single-process deployments. Entities
never leave the store by reference: every read and write returns a deep
copy. Mutations run under one ``asyncio.Lock`` so id assignment and the
article count increment happen as a single step; reads take no lock.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from multilingua.exceptions import ArticleNotFoundError, ConflictError, SubjectNotFoundError
from multilingua.schemas import ArticleCreate, ArticleResponse, ArticleUpdate, SubjectCreate, SubjectResponse
from multilingua.storage.base import CatalogStore, build_article_fields, merge_article_patch, validate_input

logger = logging.getLogger(__name__)


class MemoryCatalogStore(CatalogStore):
    def __init__(self) -> None:
        self._subjects: dict[int, SubjectResponse] = {}
        self._articles: dict[int, ArticleResponse] = {}
        self._next_subject_id = 1
        self._next_article_id = 1
        self._lock = asyncio.Lock()

    # ── Subjects ──────────────────────────────────────────────────────────────

    async def create_subject(self, data: SubjectCreate | Mapping[str, Any]) -> SubjectResponse:
        data = validate_input(SubjectCreate, data)
        async with self._lock:
            if self._find_subject(data.slug) is not None:
                raise ConflictError("Subject", "slug", data.slug)

            subject = SubjectResponse(
                id=self._next_subject_id,
                name=data.name,
                slug=data.slug,
                icon=data.icon,
                article_count=0,
            )
            self._next_subject_id += 1
            self._subjects[subject.id] = subject

        logger.info("Subject created: id=%d slug=%s", subject.id, subject.slug)
        return subject.model_copy(deep=True)

    async def get_subject(self, subject_id: int) -> SubjectResponse | None:
        subject = self._subjects.get(subject_id)
        return subject.model_copy(deep=True) if subject else None

    async def get_subject_by_slug(self, slug: str) -> SubjectResponse | None:
        subject = self._find_subject(slug)
        return subject.model_copy(deep=True) if subject else None

    async def list_subjects(self) -> list[SubjectResponse]:
        return [subject.model_copy(deep=True) for subject in self._subjects.values()]

    # ── Articles ──────────────────────────────────────────────────────────────

    async def create_article(self, data: ArticleCreate | Mapping[str, Any]) -> ArticleResponse:
        data = validate_input(ArticleCreate, data)
        async with self._lock:
            subject = self._subjects.get(data.subject_id)
            if subject is None:
                raise SubjectNotFoundError(data.subject_id)
            if self._find_article(data.slug) is not None:
                raise ConflictError("Article", "slug", data.slug)

            # entity is built before any state changes
            article = ArticleResponse(id=self._next_article_id, **build_article_fields(data))
            self._next_article_id += 1
            self._articles[article.id] = article
            subject.article_count += 1

        logger.info("Article created: id=%d slug=%s subject_id=%d", article.id, article.slug, article.subject_id)
        return article.model_copy(deep=True)

    async def update_article(self, article_id: int, patch: ArticleUpdate | Mapping[str, Any]) -> ArticleResponse:
        patch = validate_input(ArticleUpdate, patch)
        async with self._lock:
            current = self._articles.get(article_id)
            if current is None:
                raise ArticleNotFoundError(article_id)

            changes = merge_article_patch(current, patch)
            if "slug" in changes and changes["slug"] != current.slug:
                if self._find_article(changes["slug"]) is not None:
                    raise ConflictError("Article", "slug", changes["slug"])
            if "subject_id" in changes and changes["subject_id"] not in self._subjects:
                raise SubjectNotFoundError(changes["subject_id"])

            updated = ArticleResponse.model_validate({**current.model_dump(), **changes})
            self._articles[article_id] = updated

        logger.info("Article updated: id=%d fields=%s", article_id, sorted(changes))
        return updated.model_copy(deep=True)

    async def delete_article(self, article_id: int) -> None:
        async with self._lock:
            if self._articles.pop(article_id, None) is None:
                raise ArticleNotFoundError(article_id)
        logger.info("Article deleted: id=%d", article_id)

    async def get_article(self, article_id: int) -> ArticleResponse | None:
        article = self._articles.get(article_id)
        return article.model_copy(deep=True) if article else None

    async def get_article_by_slug(self, slug: str) -> ArticleResponse | None:
        article = self._find_article(slug)
        return article.model_copy(deep=True) if article else None

    async def list_articles(
        self,
        *,
        subject_id: int | None = None,
        featured: bool | None = None,
    ) -> list[ArticleResponse]:
        articles = list(self._articles.values())
        if subject_id is not None:
            articles = [a for a in articles if a.subject_id == subject_id]
        if featured is not None:
            articles = [a for a in articles if a.featured == featured]
        return [article.model_copy(deep=True) for article in articles]

    # ── Helpers ───────────────────────────────────────────────────────────────

    def _find_subject(self, slug: str) -> SubjectResponse | None:
        return next((s for s in self._subjects.values() if s.slug == slug), None)

    def _find_article(self, slug: str) -> ArticleResponse | None:
        return next((a for a in self._articles.values() if a.slug == slug), None)
