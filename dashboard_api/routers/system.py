"""System routes: database seeding for the dashboard.

`GET /seed` creates the schema if needed and inserts the placeholder data.
It is safe to call repeatedly; rows that already exist are skipped.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.engine import Engine

from dashboard_api.database import get_store
from dashboard_api.ratelimit import SEED_RATE_LIMIT, limiter
from dashboard_api.schemas import SeedErrorResponse, SeedResponse
from dashboard_api.seed import Seeder

logger = logging.getLogger(__name__)

router = APIRouter(tags=["System"])

SEED_SUCCESS_MESSAGE = "Database seeded successfully"


@router.get(
    "/seed",
    response_model=SeedResponse,
    responses={500: {"model": SeedErrorResponse, "description": "Seeding failed and was rolled back"}},
)
@limiter.limit(SEED_RATE_LIMIT)
def seed_data(request: Request, engine: Engine = Depends(get_store)) -> SeedResponse:
    """Seed the dashboard tables with placeholder data.

    Failures raise SeedError, which the application turns into the uniform
    500 payload.
    """
    result = Seeder(engine).seed()
    logger.info("Seed completed: %s", result.model_dump())
    return SeedResponse(message=SEED_SUCCESS_MESSAGE)
