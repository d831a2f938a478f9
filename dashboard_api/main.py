"""FastAPI application and app configuration for the dashboard API.

This module creates the FastAPI `app`, configures middleware (CORS, rate limiting),
registers the routers and maps seeding failures onto the standard error payload.
No store connection is opened at startup; each seeding request opens its own.
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import List

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from dashboard_api.errors import SeedError, StoreConfigurationError, rate_limited_response, seed_failed_response
from dashboard_api.helpers.openapi import augment_openapi
from dashboard_api.ratelimit import limiter
from dashboard_api.routers import system

logger = logging.getLogger(__name__)
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Lifespan startup: dashboard API ready")
    yield
    logger.info("Lifespan shutdown: cleaning up resources")


app = FastAPI(title="Dashboard API", version="1.0.0", lifespan=lifespan)
app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)

# CORS (developer friendly defaults)
origins = os.getenv("CORS_ORIGINS", "*")
if origins == "*":
    allowed_origins: List[str] = ["*"]
else:
    # comma separated list
    allowed_origins = [o.strip() for o in origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    return rate_limited_response()


@app.exception_handler(SeedError)
async def seed_error_handler(request: Request, exc: SeedError):
    # Run failures are logged with their traceback by the seeder itself
    if isinstance(exc, StoreConfigurationError):
        logger.error("Store configuration error: %s", exc)
    return seed_failed_response()


@app.get("/api/health", tags=["Health"])
async def health() -> dict:
    return {"status": "ok"}


app.include_router(system.router)
logger.info("Included router: dashboard_api.routers.system")


def custom_openapi() -> dict:
    if app.openapi_schema is None:
        schema = get_openapi(title=app.title, version=app.version, routes=app.routes)
        app.openapi_schema = augment_openapi(schema)
    return app.openapi_schema


app.openapi = custom_openapi  # type: ignore[method-assign]


__all__ = ["app"]
