"""
Pytest configuration and fixtures for the Multilingua tests
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH120

from multilingua.main import create_app  # noqa: E402
from multilingua.storage import MemoryCatalogStore, SQLCatalogStore  # noqa: E402

# SQLite in-memory database; every engine gets a fresh, private database
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def memory_store() -> MemoryCatalogStore:
    return MemoryCatalogStore()


@pytest.fixture
async def sql_store():
    store = SQLCatalogStore.from_url(TEST_DATABASE_URL)
    await store.initialize()
    yield store
    await store.close()


@pytest.fixture(params=["memory", "sql"])
async def store(request):
    """Run a test once against each catalog backend."""
    if request.param == "memory":
        yield MemoryCatalogStore()
    else:
        sql = SQLCatalogStore.from_url(TEST_DATABASE_URL)
        await sql.initialize()
        yield sql
        await sql.close()


@pytest.fixture
async def science(store):
    """The 'Science' subject from the end-to-end scenario (id=1)."""
    return await store.create_subject({"name": "Science", "slug": "science"})


@pytest.fixture
def client():
    """Test client around an empty in-memory catalog."""
    app = create_app(store=MemoryCatalogStore(), seed_demo_data=False)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client():
    """Test client around the demo catalog."""
    app = create_app(store=MemoryCatalogStore(), seed_demo_data=True)
    with TestClient(app) as test_client:
        yield test_client
