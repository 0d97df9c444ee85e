"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from folio.config import Settings
from folio.interface.api.error_handlers import register_error_handlers
from folio.interface.api.routes import (
    cache,
    categories,
    health,
    journals,
    portfolios,
    tags,
)
from folio.util.di.container import create_container, setup_di
from folio.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, configure in conftest.py if needed.

    Args:
        container: DI container to use; the production container is built
            when omitted (tests pass one with in-memory persistence)
    """
    settings = Settings()

    # Instrument httpx for cache warming requests
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    container = container or create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # Closes APP-scoped resources: engine, warmer http client
        await container.close()

    app_instance = FastAPI(
        title="Folio API",
        description="Content API for a personal portfolio site: journal entries, categories, tags and portfolio projects",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=[
            "Content-Type",
            "Accept",
            "Origin",
            "Cache-Control",
            "If-None-Match",
            "If-Modified-Since",
        ],
        expose_headers=[
            "Content-Length",
            "Content-Type",
            "ETag",
            "Last-Modified",
            "Cache-Control",
            "X-Cache-Generated",
        ],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container)
    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(journals.router)
    app_instance.include_router(categories.router)
    app_instance.include_router(tags.router)
    app_instance.include_router(portfolios.router)
    app_instance.include_router(cache.router)

    return app_instance
