import logging

from multilingua.config import settings
from .base import CatalogStore, validate_input
from .memory import MemoryCatalogStore
from .sql import SQLCatalogStore

logger = logging.getLogger(__name__)


def create_store(backend: str | None = None, database_url: str | None = None) -> CatalogStore:
    """Build the configured catalog store backend ("sql" or "memory")."""
    backend = (backend or settings.storage_backend).lower()
    if backend == "memory":
        logger.info("Using in-memory catalog store")
        return MemoryCatalogStore()
    if backend == "sql":
        logger.info("Using SQL catalog store")
        return SQLCatalogStore.from_url(database_url)
    raise ValueError(f"Unknown storage backend '{backend}' (expected 'sql' or 'memory')")


__all__ = [
    "CatalogStore",
    "MemoryCatalogStore",
    "SQLCatalogStore",
    "create_store",
    "validate_input",
]
