"""FAQ API - FastAPI Entry Point."""
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

import structlog
from fastapi import FastAPI

from faq_api.config import settings
from faq_api.database import engine, init_models
from faq_api.middleware.cors import setup_cors
from faq_api.middleware.error_handler import setup_error_handlers
from faq_api.middleware.logging_middleware import LoggingMiddleware
from faq_api.api import faqs as faqs_router
from faq_api.api import tags as tags_router

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    logger.info("startup", env=settings.APP_ENV, database=engine.url.render_as_string(hide_password=True))
    try:
        await init_models(engine)
    except Exception as exc:
        # Startup aborts; nothing is served without a schema.
        logger.critical("schema_creation_failed", error=str(exc), exc_info=True)
        await engine.dispose()
        raise

    yield

    await engine.dispose()
    logger.info("shutdown")


def create_app() -> FastAPI:
    application = FastAPI(
        title="FAQ API",
        description="FAQ knowledge-base with categorized tags",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Middleware (order matters: last added = first executed)
    setup_cors(application)
    setup_error_handlers(application)
    application.add_middleware(LoggingMiddleware)

    # API Routers
    application.include_router(faqs_router.router, prefix="/faqs", tags=["FAQs"])
    application.include_router(faqs_router.by_tag_router, prefix="/faqs_by_tag", tags=["FAQs"])
    application.include_router(tags_router.router, prefix="/tags", tags=["Tags"])

    # Health check
    @application.get("/health", tags=["health"])
    async def health_check() -> dict[str, str]:
        return {"status": "ok"}

    return application


app = create_app()
