"""Shared slowapi limiter for the dashboard API."""

from __future__ import annotations

import os

from slowapi import Limiter
from slowapi.util import get_remote_address

DEFAULT_RATE_LIMIT = os.getenv("RATE_LIMIT", "10/minute")
SEED_RATE_LIMIT = os.getenv("SEED_RATE_LIMIT", "5/minute")

limiter = Limiter(key_func=get_remote_address, default_limits=[DEFAULT_RATE_LIMIT])


__all__ = ["DEFAULT_RATE_LIMIT", "SEED_RATE_LIMIT", "limiter"]
