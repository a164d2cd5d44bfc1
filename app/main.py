from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.api.v1.router import api_v1_router
from app.core.config import get_settings
from app.core.http import create_http_client, set_http_client
from app.core.logging import configure_logging
from app.core.rate_limit import limiter
from app.web.pages import router as pages_router


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    if not settings.openweather_api_key:
        logger.warning("WEATHERPAGE_OPENWEATHER_API_KEY is not set; weather requests will be rejected upstream")

    # Setup HTTP client
    client = create_http_client(settings)
    set_http_client(client)

    # Store settings in app state
    app.state.settings = settings

    try:
        yield
    finally:
        set_http_client(None)
        await client.aclose()


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="weather page",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(api_v1_router, prefix="/api/v1")
    app.include_router(pages_router)
    return app


app = create_app()
