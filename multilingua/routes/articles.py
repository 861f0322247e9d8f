"""
Article Routes (prefix: /api/articles)

    GET    /                         → all articles
    GET    /featured                 → featured articles, newest first
    GET    /recent?limit=5           → most recent articles
    GET    /subject/{subject_id}     → articles of one subject, newest first
    GET    /{slug}                   → single article
    GET    /{slug}/view?lang=fr      → effective view in one language
    GET    /{slug}/languages         → language-selector options
    POST   /                         → create article
    PUT    /{article_id}             → partial update
    DELETE /{article_id}             → delete article

Fixed paths are declared before ``/{slug}`` so they are not shadowed.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from multilingua.dependencies import get_query_engine, get_request_locale, get_store
from multilingua.schemas import ArticleCreate, ArticleResponse, ArticleUpdate, EffectiveView, LanguageInfo
from multilingua.services import translation_service
from multilingua.services.query_service import QueryEngine
from multilingua.storage.base import CatalogStore

router = APIRouter()
logger = logging.getLogger(__name__)


async def _article_or_404(slug: str, queries: QueryEngine) -> ArticleResponse:
    article = await queries.get_article_by_slug(slug)
    if article is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Article not found")
    return article


@router.get("", response_model=List[ArticleResponse])
async def list_articles(queries: QueryEngine = Depends(get_query_engine)):
    return await queries.get_all_articles()


@router.get("/featured", response_model=List[ArticleResponse])
async def list_featured_articles(queries: QueryEngine = Depends(get_query_engine)):
    return await queries.get_featured_articles()


@router.get("/recent", response_model=List[ArticleResponse])
async def list_recent_articles(
    limit: Optional[int] = Query(None, description="Number of articles; defaults to 5."),
    queries: QueryEngine = Depends(get_query_engine),
):
    return await queries.get_recent_articles(limit)


@router.get("/subject/{subject_id}", response_model=List[ArticleResponse])
async def list_articles_by_subject(
    subject_id: int,
    queries: QueryEngine = Depends(get_query_engine),
    store: CatalogStore = Depends(get_store),
):
    if await store.get_subject(subject_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subject not found")
    return await queries.get_articles_by_subject(subject_id)


@router.get("/{slug}", response_model=ArticleResponse)
async def get_article(slug: str, queries: QueryEngine = Depends(get_query_engine)):
    return await _article_or_404(slug, queries)


@router.get("/{slug}/view", response_model=EffectiveView)
async def view_article(
    slug: str,
    response: Response,
    lang: Optional[str] = Query(None, description="Requested language; defaults to the negotiated request locale."),
    locale: str = Depends(get_request_locale),
    queries: QueryEngine = Depends(get_query_engine),
):
    """Return the content a reader sees for the requested language."""
    article = await _article_or_404(slug, queries)
    view = translation_service.resolve(article, lang or locale)
    response.headers["Content-Language"] = view.language
    return view


@router.get("/{slug}/languages", response_model=List[LanguageInfo])
async def get_article_languages(slug: str, queries: QueryEngine = Depends(get_query_engine)):
    article = await _article_or_404(slug, queries)
    translation_service.find_language_divergence(article)
    return translation_service.language_options(article)


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(article: ArticleCreate, store: CatalogStore = Depends(get_store)):
    return await store.create_article(article)


@router.put("/{article_id}", response_model=ArticleResponse)
async def update_article(article_id: int, patch: ArticleUpdate, store: CatalogStore = Depends(get_store)):
    return await store.update_article(article_id, patch)


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(article_id: int, store: CatalogStore = Depends(get_store)):
    await store.delete_article(article_id)
