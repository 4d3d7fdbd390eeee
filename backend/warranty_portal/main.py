"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from warranty_portal.config import get_settings
from warranty_portal.infrastructure.dependencies import get_fixture_catalog
from warranty_portal.infrastructure.logging.log_config import setup_logging
from warranty_portal.infrastructure.logging.request_logging import log_requests
from warranty_portal.presentation.api.router import router as api_router
from warranty_portal.presentation.screens.error_handlers import register_exception_handlers
from warranty_portal.presentation.screens.router import router as screens_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and load fixtures up front."""
    setup_logging()

    # A broken fixture file should stop startup, not the first request.
    catalog = get_fixture_catalog()
    logger.info(
        "Warranty portal ready: %d products, %d service records",
        len(catalog.products),
        len(catalog.service_history),
    )

    yield


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.middleware("http")(log_requests)

    # Client-held session: role, authentication flag, mobile number
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret_key,
        session_cookie=settings.session_cookie_name,
        max_age=settings.session_max_age,
        same_site="lax",
        https_only=settings.session_https_only,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(api_router)
    app.include_router(screens_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "warranty_portal.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
