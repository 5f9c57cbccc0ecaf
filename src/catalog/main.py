"""
Application factory.

    uvicorn catalog.main:app

Start-up configures logging from Settings and creates missing tables.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from catalog.api.v1.error_handlers import register_exception_handlers
from catalog.api.v1.routers import api_router
from catalog.config import Settings, get_settings
from catalog.core.logging import RequestIDMiddleware, setup_logging
from catalog.database.session import engine, init_models
from catalog.utils.logging import get_project_name, get_project_version

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, *, create_tables: bool = True) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings)
        if create_tables:
            await init_models()
        logger.info("app.startup", extra={"env": settings.ENV})
        yield
        await engine.dispose()
        logger.info("app.shutdown")

    app = FastAPI(
        title=get_project_name() or "product-catalog",
        version=get_project_version(),
        lifespan=lifespan,
    )
    app.add_middleware(RequestIDMiddleware)
    register_exception_handlers(app)
    app.include_router(api_router)
    return app


app = create_app()
