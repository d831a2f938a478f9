"""Seeding errors and the standard error payloads returned by the API.

Provides:
- SeedError: raised when a seeding run fails; the transaction has been rolled back
- StoreConfigurationError: the store handle could not be built from configuration
- seed_failed_response() -> JSONResponse with {"error": "Failed to seed database"}
- rate_limited_response() -> JSONResponse with {"error": "Rate limit exceeded"}
"""
from __future__ import annotations

from fastapi import status
from fastapi.responses import JSONResponse

SEED_FAILED_MESSAGE = "Failed to seed database"
RATE_LIMITED_MESSAGE = "Rate limit exceeded"


class SeedError(Exception):
    """A seeding run failed. The original cause is chained as ``__cause__``."""


class StoreConfigurationError(SeedError):
    pass


def seed_failed_response() -> JSONResponse:
    # Uniform body: callers never learn which step failed
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": SEED_FAILED_MESSAGE})


def rate_limited_response() -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_429_TOO_MANY_REQUESTS, content={"error": RATE_LIMITED_MESSAGE})


__all__ = [
    "SEED_FAILED_MESSAGE",
    "RATE_LIMITED_MESSAGE",
    "SeedError",
    "StoreConfigurationError",
    "seed_failed_response",
    "rate_limited_response",
]
