from fastapi import Depends, Request

from multilingua.config import settings
from multilingua.services.query_service import QueryEngine
from multilingua.storage.base import CatalogStore


def get_store(request: Request) -> CatalogStore:
    return request.app.state.store


def get_query_engine(store: CatalogStore = Depends(get_store)) -> QueryEngine:
    return QueryEngine(store)


def get_request_locale(request: Request) -> str:
    return getattr(request.state, "locale", settings.default_language)
