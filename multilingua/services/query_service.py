"""
Query Engine

Read-only views over the catalog store. Date-ordered results are newest
first; articles sharing a publish date keep their insertion order because
``sorted`` is stable, including with ``reverse=True``.
"""

from __future__ import annotations

import logging

from multilingua.config import settings
from multilingua.exceptions import ValidationError
from multilingua.schemas import ArticleResponse, SubjectResponse
from multilingua.storage.base import CatalogStore

logger = logging.getLogger(__name__)


def newest_first(articles: list[ArticleResponse]) -> list[ArticleResponse]:
    return sorted(articles, key=lambda article: article.publish_date, reverse=True)


class QueryEngine:
    def __init__(self, store: CatalogStore):
        self.store = store

    async def get_all_subjects(self) -> list[SubjectResponse]:
        return await self.store.list_subjects()

    async def get_subject_by_slug(self, slug: str) -> SubjectResponse | None:
        return await self.store.get_subject_by_slug(slug)

    async def get_all_articles(self) -> list[ArticleResponse]:
        return await self.store.list_articles()

    async def get_featured_articles(self) -> list[ArticleResponse]:
        return newest_first(await self.store.list_articles(featured=True))

    async def get_recent_articles(self, limit: int | None = None) -> list[ArticleResponse]:
        """The ``limit`` most recently published articles (default from settings, 5).

        ``limit=0`` yields an empty list; a limit above the article count
        yields every article.
        """
        if limit is None:
            limit = settings.recent_articles_limit
        if limit < 0:
            raise ValidationError("limit must be zero or a positive integer", field="limit")
        if limit == 0:
            return []
        return newest_first(await self.store.list_articles())[:limit]

    async def get_articles_by_subject(self, subject_id: int) -> list[ArticleResponse]:
        return newest_first(await self.store.list_articles(subject_id=subject_id))

    async def get_article_by_slug(self, slug: str) -> ArticleResponse | None:
        return await self.store.get_article_by_slug(slug)
