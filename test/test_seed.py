"""
Tests for the demo catalog loader
"""

from multilingua.seed import DEFAULT_SUBJECTS, SAMPLE_ARTICLES, seed_catalog
from multilingua.services import translation_service
from multilingua.services.query_service import QueryEngine


class TestSeedCatalog:
    async def test_loads_subjects_and_articles(self, store):
        created = await seed_catalog(store)

        assert created == len(SAMPLE_ARTICLES)
        assert [s.slug for s in await store.list_subjects()] == [s["slug"] for s in DEFAULT_SUBJECTS]
        assert len(await store.list_articles()) == len(SAMPLE_ARTICLES)

    async def test_article_counts_match_seeded_articles(self, store):
        await seed_catalog(store)

        counts = {s.slug: s.article_count for s in await store.list_subjects()}
        assert counts == {
            "technology": 2,
            "science": 2,
            "environment": 1,
            "health": 2,
            "arts-culture": 0,
            "travel": 1,
        }

    async def test_second_run_is_a_no_op(self, store):
        await seed_catalog(store)

        assert await seed_catalog(store) == 0
        assert len(await store.list_articles()) == len(SAMPLE_ARTICLES)

    async def test_every_article_has_complete_english(self, store):
        await seed_catalog(store)

        for article in await store.list_articles():
            assert translation_service.is_complete(article.translations["en"])
            assert article.title == article.translations["en"].title

    async def test_featured_and_recent_views(self, store):
        await seed_catalog(store)
        queries = QueryEngine(store)

        featured = await queries.get_featured_articles()
        recent = await queries.get_recent_articles()

        assert len(featured) == 6
        assert featured[0].slug == "water-cycle-explained"
        assert [a.slug for a in recent] == [
            "water-cycle-explained",
            "rise-quantum-computing",
            "breaking-code-dna",
            "ocean-conservation-breakthroughs",
            "mindfulness-mental-health",
        ]

    async def test_arabic_view_of_quantum_article(self, store):
        await seed_catalog(store)
        article = await store.get_article_by_slug("rise-quantum-computing")

        view = translation_service.resolve(article, "ar")

        assert view.language == "ar"
        assert view.is_rtl is True

    async def test_english_only_article_falls_back(self, store):
        await seed_catalog(store)
        article = await store.get_article_by_slug("mindfulness-mental-health")

        view = translation_service.resolve(article, "fr")

        assert view.language == "en"
        assert view.is_fallback is True
