"""
shopblog.api.app

FastAPI app factory for the shopblog service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Initialize and dispose shared infrastructure (DB engine/session factory).
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from shopblog import __version__
from shopblog.api.errors import register_error_handlers
from shopblog.api.routers.categories import router as categories_router
from shopblog.api.routers.comments import router as comments_router
from shopblog.api.routers.health import router as health_router
from shopblog.api.routers.items import router as items_router
from shopblog.api.routers.orders import router as orders_router
from shopblog.api.routers.posts import router as posts_router
from shopblog.api.routers.users import router as users_router
from shopblog.db.init_db import init_db
from shopblog.db.session import create_engine, create_sessionmaker
from shopblog.observability.logging import configure_logging, get_logger
from shopblog.observability.middleware import RequestContextMiddleware
from shopblog.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.auto_create_tables:
            # Dev/test convenience; prod runs Alembic migrations.
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="shopblog",
        lifespan=lifespan,
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
    )

    app.add_middleware(RequestContextMiddleware)
    register_error_handlers(app)
    app.include_router(health_router, tags=["health"])
    # Same order as the resource table; no root path is mounted.
    for router in (
        categories_router,
        comments_router,
        posts_router,
        items_router,
        orders_router,
        users_router,
    ):
        app.include_router(router)

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; data access lives in `shopblog.db.repositories`.
