"""Pydantic schemas for the dashboard seeder.

Fixture records are validated on load so malformed placeholder data fails
before any statement reaches the store. Response models describe the two
acknowledgments returned by ``GET /seed``.
"""

from __future__ import annotations

import datetime as dt
import uuid
from enum import Enum
from typing import List

from pydantic import BaseModel, EmailStr, Field


class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


# ----------------------------- Fixtures ---------------------------------
class UserFixture(BaseModel):
    id: uuid.UUID
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    # Plaintext; hashed by the seeder and never stored as-is
    password: str = Field(..., min_length=1)


class CustomerFixture(BaseModel):
    id: uuid.UUID
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    image_url: str = Field(..., max_length=255)


class InvoiceFixture(BaseModel):
    customer_id: uuid.UUID
    amount: int = Field(..., ge=0, description="Amount in cents")
    status: InvoiceStatus
    date: dt.date


class RevenueFixture(BaseModel):
    month: str = Field(..., min_length=1, max_length=4)
    revenue: int


class FixtureSet(BaseModel):
    """The four fixture lists a seeding run inserts."""

    users: List[UserFixture] = Field(default_factory=list)
    customers: List[CustomerFixture] = Field(default_factory=list)
    invoices: List[InvoiceFixture] = Field(default_factory=list)
    revenue: List[RevenueFixture] = Field(default_factory=list)


# ----------------------------- Results ----------------------------------
class SeedResult(BaseModel):
    """Rows actually inserted by one run; zero for rows that were already present."""

    users: int = 0
    customers: int = 0
    invoices: int = 0
    revenue: int = 0


class SeedResponse(BaseModel):
    message: str


class SeedErrorResponse(BaseModel):
    error: str


__all__ = [
    "InvoiceStatus",
    "UserFixture",
    "CustomerFixture",
    "InvoiceFixture",
    "RevenueFixture",
    "FixtureSet",
    "SeedResult",
    "SeedResponse",
    "SeedErrorResponse",
]
