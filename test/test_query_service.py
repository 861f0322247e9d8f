"""
Tests for the query engine
"""

import pytest

from multilingua.exceptions import ValidationError
from multilingua.services.query_service import QueryEngine, newest_first
from utils.payloads import article_payload, dated


@pytest.fixture
def queries(store) -> QueryEngine:
    return QueryEngine(store)


async def _create(store, subject_id, slug, day, **overrides):
    return await store.create_article(article_payload(subject_id, slug=slug, publish_date=dated(day), **overrides))


class TestSubjects:
    async def test_get_all_subjects(self, queries, store):
        await store.create_subject({"name": "Science"})
        await store.create_subject({"name": "Travel"})

        assert [s.slug for s in await queries.get_all_subjects()] == ["science", "travel"]

    async def test_get_subject_by_slug(self, queries, science):
        assert (await queries.get_subject_by_slug("science")).id == science.id
        assert await queries.get_subject_by_slug("nope") is None


class TestFeaturedArticles:
    async def test_only_featured_newest_first(self, queries, store, science):
        await _create(store, science.id, "old-featured", 1, featured=True)
        await _create(store, science.id, "not-featured", 9)
        await _create(store, science.id, "new-featured", 5, featured=True)

        result = await queries.get_featured_articles()

        assert [a.slug for a in result] == ["new-featured", "old-featured"]

    async def test_ties_keep_insertion_order(self, queries, store, science):
        for slug in ["first", "second", "third"]:
            await _create(store, science.id, slug, 3, featured=True)

        result = await queries.get_featured_articles()

        assert [a.slug for a in result] == ["first", "second", "third"]

    async def test_empty_when_none_featured(self, queries, store, science):
        await _create(store, science.id, "plain", 1)

        assert await queries.get_featured_articles() == []


class TestRecentArticles:
    async def test_newest_first_with_limit(self, queries, store, science):
        for day, slug in [(2, "b"), (5, "e"), (1, "a"), (4, "d")]:
            await _create(store, science.id, slug, day)

        result = await queries.get_recent_articles(3)

        assert [a.slug for a in result] == ["e", "d", "b"]

    async def test_default_limit_is_five(self, queries, store, science):
        for day in range(1, 8):
            await _create(store, science.id, f"day-{day}", day)

        result = await queries.get_recent_articles()

        assert [a.slug for a in result] == ["day-7", "day-6", "day-5", "day-4", "day-3"]

    async def test_limit_zero_returns_empty(self, queries, store, science):
        await _create(store, science.id, "a", 1)

        assert await queries.get_recent_articles(0) == []

    async def test_limit_above_count_returns_all(self, queries, store, science):
        await _create(store, science.id, "a", 1)
        await _create(store, science.id, "b", 2)

        result = await queries.get_recent_articles(50)

        assert [a.slug for a in result] == ["b", "a"]

    async def test_negative_limit_raises(self, queries):
        with pytest.raises(ValidationError):
            await queries.get_recent_articles(-1)

    async def test_ties_keep_insertion_order(self, queries, store, science):
        await _create(store, science.id, "first", 3)
        await _create(store, science.id, "second", 3)
        await _create(store, science.id, "newest", 4)

        result = await queries.get_recent_articles(3)

        assert [a.slug for a in result] == ["newest", "first", "second"]

    async def test_empty_catalog(self, queries):
        assert await queries.get_recent_articles() == []


class TestArticlesBySubject:
    async def test_filters_and_orders(self, queries, store, science):
        health = await store.create_subject({"name": "Health"})
        await _create(store, science.id, "s-old", 1)
        await _create(store, health.id, "h", 9)
        await _create(store, science.id, "s-new", 6)

        result = await queries.get_articles_by_subject(science.id)

        assert [a.slug for a in result] == ["s-new", "s-old"]
        assert all(a.subject_id == science.id for a in result)

    async def test_unknown_subject_is_empty(self, queries):
        assert await queries.get_articles_by_subject(999) == []


class TestArticleLookup:
    async def test_get_article_by_slug(self, queries, store, science):
        created = await _create(store, science.id, "lookup", 1)

        found = await queries.get_article_by_slug("lookup")

        assert found.id == created.id
        assert await queries.get_article_by_slug("missing") is None

    async def test_get_all_articles_insertion_order(self, queries, store, science):
        await _create(store, science.id, "z", 9)
        await _create(store, science.id, "a", 1)

        assert [a.slug for a in await queries.get_all_articles()] == ["z", "a"]


class TestNewestFirst:
    def test_does_not_mutate_input(self):
        from multilingua.schemas import ArticleResponse

        def article(i, day):
            return ArticleResponse(
                id=i,
                slug=f"a-{i}",
                subject_id=1,
                title="T",
                excerpt="E",
                content="C",
                author="A",
                image_url="https://img",
                read_time=1,
                publish_date=dated(day),
                translations={"en": {"title": "T", "excerpt": "E", "content": "C"}},
                available_languages=["en"],
            )

        articles = [article(1, 1), article(2, 3)]

        result = newest_first(articles)

        assert [a.id for a in result] == [2, 1]
        assert [a.id for a in articles] == [1, 2]
