import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from multilingua.config import settings
from multilingua.exception_handlers import register_exception_handlers
from multilingua.middleware.language import LanguageMiddleware
from multilingua.middleware.logging import RequestLoggingMiddleware
from multilingua.routes import articles, i18n, subjects
from multilingua.seed import seed_catalog
from multilingua.storage import CatalogStore, create_store

logger = logging.getLogger(__name__)


def create_app(store: CatalogStore | None = None, seed_demo_data: bool | None = None) -> FastAPI:
    """Create the FastAPI application around a catalog store.

    Without an explicit store the backend configured in settings is used.
    """
    if store is None:
        store = create_store()
    if seed_demo_data is None:
        seed_demo_data = settings.seed_demo_data

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting up the application...")
        await app.state.store.initialize()
        if seed_demo_data:
            await seed_catalog(app.state.store)
        yield
        logger.info("Shutting down the application...")
        await app.state.store.close()

    app = FastAPI(
        title=settings.app_name,
        description="Multilingual article catalog API",
        debug=settings.debug,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.store = store

    # Starlette runs the last added middleware first
    app.add_middleware(LanguageMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(subjects.router, prefix="/api/subjects", tags=["Subjects"])
    app.include_router(articles.router, prefix="/api/articles", tags=["Articles"])
    app.include_router(i18n.router, prefix="/api/i18n", tags=["Internationalization"])

    @app.get("/", tags=["Root"])
    async def root():
        return {"message": f"Welcome to the {settings.app_name} API"}

    if settings.debug:
        logger.info(f"Running in {settings.environment} mode")
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

    return app
