"""Database configuration and store handle management for the dashboard API.

Exports:
- Base: declarative base for models
- normalize_database_url(url): map plain postgres URLs onto the psycopg driver
- create_store_engine(url): build an explicit SQLAlchemy engine for one seeding run
- store_engine(): context manager that opens an engine from POSTGRES_URL and disposes it
- get_store: FastAPI dependency that yields a store engine scoped to the request

Behavior:
- Reads POSTGRES_URL from env. There is no fallback store: an unset URL is a
  configuration error raised when the store is opened, not at import time.
- PostgreSQL connections are opened with libpq ``sslmode`` taken from
  POSTGRES_SSLMODE (default ``require``).
- SQLite URLs (local development and tests) get ``check_same_thread=False``.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.orm import declarative_base

from dashboard_api.errors import StoreConfigurationError

logger = logging.getLogger(__name__)

POSTGRES_SSLMODE: str = os.getenv("POSTGRES_SSLMODE", "require")

_DRIVER_ALIASES = {
    "postgres": "postgresql+psycopg",
    "postgresql": "postgresql+psycopg",
}

# Declarative base for models
Base = declarative_base()


def normalize_database_url(url: str) -> str:
    """Return `url` with bare ``postgres://``/``postgresql://`` schemes mapped to psycopg."""
    url = url.strip()
    scheme, sep, rest = url.partition("://")
    if sep and scheme in _DRIVER_ALIASES:
        return f"{_DRIVER_ALIASES[scheme]}://{rest}"
    return url


def _connect_args_for(url: str) -> dict:
    backend = make_url(url).get_backend_name()
    if backend == "postgresql":
        return {"sslmode": POSTGRES_SSLMODE}
    if backend == "sqlite":
        # SQLite requires `check_same_thread=False` when used from the uvicorn threadpool
        return {"check_same_thread": False}
    return {}


def create_store_engine(url: Optional[str]) -> Engine:
    """Build an engine for `url`.

    Raises StoreConfigurationError when the URL is missing or cannot be parsed.
    No connection is made here; connectivity problems surface on first use.
    """
    if not url or not url.strip():
        raise StoreConfigurationError("POSTGRES_URL is not set")

    normalized = normalize_database_url(url)
    try:
        return create_engine(normalized, connect_args=_connect_args_for(normalized), future=True)
    except (ArgumentError, ImportError) as exc:
        raise StoreConfigurationError(f"Invalid store URL: {exc}") from exc


@contextmanager
def store_engine(url: Optional[str] = None) -> Generator[Engine, None, None]:
    """Open a store engine for the duration of the block, then dispose its pool.

    Usage:
        with store_engine() as engine:
            Seeder(engine).seed()
    """
    engine = create_store_engine(url if url is not None else os.getenv("POSTGRES_URL"))
    logger.debug("Opened store engine for %s", engine.url.render_as_string(hide_password=True))
    try:
        yield engine
    finally:
        engine.dispose()
        logger.debug("Disposed store engine")


def get_store() -> Generator[Engine, None, None]:
    """Yield a store engine for FastAPI dependencies.

    Usage:
        def endpoint(engine: Engine = Depends(get_store)):
            ...
    """
    with store_engine() as engine:
        yield engine


__all__ = [
    "Base",
    "POSTGRES_SSLMODE",
    "normalize_database_url",
    "create_store_engine",
    "store_engine",
    "get_store",
]
