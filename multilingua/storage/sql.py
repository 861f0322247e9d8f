"""
SQL Catalog Store

SQLAlchemy async backend. Every write runs in a single transaction; the
subject's article count is bumped with an ``article_count + 1`` expression so
concurrent creators never overwrite each other's increment. Rows are
converted to response schemas before leaving the session.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from multilingua.database import build_engine, build_session_factory, create_tables
from multilingua.exceptions import ArticleNotFoundError, ConflictError, SubjectNotFoundError
from multilingua.models import Article, Subject
from multilingua.schemas import ArticleCreate, ArticleResponse, ArticleUpdate, SubjectCreate, SubjectResponse
from multilingua.storage.base import CatalogStore, build_article_fields, merge_article_patch, validate_input

logger = logging.getLogger(__name__)


class SQLCatalogStore(CatalogStore):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession], engine=None) -> None:
        self._session_factory = session_factory
        self._engine = engine

    @classmethod
    def from_url(cls, database_url: str | None = None) -> "SQLCatalogStore":
        engine = build_engine(database_url)
        return cls(build_session_factory(engine), engine=engine)

    async def initialize(self) -> None:
        if self._engine is not None:
            await create_tables(self._engine)

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            logger.info("Database engine disposed.")

    # ── Subjects ──────────────────────────────────────────────────────────────

    async def create_subject(self, data: SubjectCreate | Mapping[str, Any]) -> SubjectResponse:
        data = validate_input(SubjectCreate, data)
        async with self._session_factory() as db:
            existing = await db.execute(select(Subject.id).where(Subject.slug == data.slug))
            if existing.first() is not None:
                raise ConflictError("Subject", "slug", data.slug)

            subject = Subject(name=data.name, slug=data.slug, icon=data.icon, article_count=0)
            db.add(subject)
            try:
                await db.commit()
            except IntegrityError as exc:
                await db.rollback()
                raise ConflictError("Subject", "slug", data.slug) from exc
            await db.refresh(subject)

            logger.info("Subject created: id=%d slug=%s", subject.id, subject.slug)
            return SubjectResponse.model_validate(subject)

    async def get_subject(self, subject_id: int) -> SubjectResponse | None:
        async with self._session_factory() as db:
            subject = await db.get(Subject, subject_id)
            return SubjectResponse.model_validate(subject) if subject else None

    async def get_subject_by_slug(self, slug: str) -> SubjectResponse | None:
        async with self._session_factory() as db:
            result = await db.execute(select(Subject).where(Subject.slug == slug))
            subject = result.scalars().first()
            return SubjectResponse.model_validate(subject) if subject else None

    async def list_subjects(self) -> list[SubjectResponse]:
        async with self._session_factory() as db:
            result = await db.execute(select(Subject).order_by(Subject.id))
            return [SubjectResponse.model_validate(s) for s in result.scalars().all()]

    # ── Articles ──────────────────────────────────────────────────────────────

    async def create_article(self, data: ArticleCreate | Mapping[str, Any]) -> ArticleResponse:
        data = validate_input(ArticleCreate, data)
        async with self._session_factory() as db:
            if await db.get(Subject, data.subject_id) is None:
                raise SubjectNotFoundError(data.subject_id)
            existing = await db.execute(select(Article.id).where(Article.slug == data.slug))
            if existing.first() is not None:
                raise ConflictError("Article", "slug", data.slug)

            article = Article(**build_article_fields(data))
            db.add(article)
            try:
                await db.flush()
                await db.execute(
                    update(Subject)
                    .where(Subject.id == data.subject_id)
                    .values(article_count=Subject.article_count + 1)
                )
                await db.commit()
            except IntegrityError as exc:
                await db.rollback()
                raise ConflictError("Article", "slug", data.slug) from exc
            await db.refresh(article)

            logger.info("Article created: id=%d slug=%s subject_id=%d", article.id, article.slug, article.subject_id)
            return ArticleResponse.model_validate(article)

    async def update_article(self, article_id: int, patch: ArticleUpdate | Mapping[str, Any]) -> ArticleResponse:
        patch = validate_input(ArticleUpdate, patch)
        async with self._session_factory() as db:
            article = await db.get(Article, article_id)
            if article is None:
                raise ArticleNotFoundError(article_id)

            changes = merge_article_patch(ArticleResponse.model_validate(article), patch)
            if "slug" in changes and changes["slug"] != article.slug:
                existing = await db.execute(select(Article.id).where(Article.slug == changes["slug"]))
                if existing.first() is not None:
                    raise ConflictError("Article", "slug", changes["slug"])
            if "subject_id" in changes and changes["subject_id"] != article.subject_id:
                if await db.get(Subject, changes["subject_id"]) is None:
                    raise SubjectNotFoundError(changes["subject_id"])

            # JSON columns are replaced, never mutated in place, so the ORM sees the change
            for field, value in changes.items():
                setattr(article, field, value)
            try:
                await db.commit()
            except IntegrityError as exc:
                await db.rollback()
                raise ConflictError("Article", "slug", changes.get("slug")) from exc
            await db.refresh(article)

            logger.info("Article updated: id=%d fields=%s", article_id, sorted(changes))
            return ArticleResponse.model_validate(article)

    async def delete_article(self, article_id: int) -> None:
        async with self._session_factory() as db:
            article = await db.get(Article, article_id)
            if article is None:
                raise ArticleNotFoundError(article_id)
            await db.delete(article)
            await db.commit()
        logger.info("Article deleted: id=%d", article_id)

    async def get_article(self, article_id: int) -> ArticleResponse | None:
        async with self._session_factory() as db:
            article = await db.get(Article, article_id)
            return ArticleResponse.model_validate(article) if article else None

    async def get_article_by_slug(self, slug: str) -> ArticleResponse | None:
        async with self._session_factory() as db:
            result = await db.execute(select(Article).where(Article.slug == slug))
            article = result.scalars().first()
            return ArticleResponse.model_validate(article) if article else None

    async def list_articles(
        self,
        *,
        subject_id: int | None = None,
        featured: bool | None = None,
    ) -> list[ArticleResponse]:
        query = select(Article)
        if subject_id is not None:
            query = query.where(Article.subject_id == subject_id)
        if featured is not None:
            query = query.where(Article.featured == featured)
        query = query.order_by(Article.id)

        async with self._session_factory() as db:
            result = await db.execute(query)
            return [ArticleResponse.model_validate(a) for a in result.scalars().all()]
