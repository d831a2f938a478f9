"""SQLAlchemy models for the dashboard store.

Models implemented:
- UserModel
- CustomerModel
- InvoiceModel
- RevenueModel

Uses SQLAlchemy 2.0 typing (Mapped, mapped_column) and the declarative Base from
`dashboard_api.database`. Primary keys default to ``uuid_generate_v4()`` on
PostgreSQL (provided by the ``uuid-ossp`` extension); SQLite renders an
equivalent random hex expression so the same tables work in local runs.
"""

from __future__ import annotations

import datetime as dt
import uuid

from sqlalchemy import Date, Integer, String, Text, Uuid
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql.expression import FunctionElement

from dashboard_api.database import Base


class uuid_generate_v4(FunctionElement):
    type = Uuid()
    inherit_cache = True
    name = "uuid_generate_v4"


@compiles(uuid_generate_v4)
def _compile_uuid_generate_v4(element, compiler, **kw):
    return "uuid_generate_v4()"


@compiles(uuid_generate_v4, "sqlite")
def _compile_uuid_generate_v4_sqlite(element, compiler, **kw):
    # Uuid is stored as 32 hex characters on SQLite
    return "(lower(hex(randomblob(16))))"


class UserModel(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, server_default=uuid_generate_v4())
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    password: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"<User id={self.id} email={self.email}>"


class CustomerModel(Base):
    __tablename__ = "customers"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, server_default=uuid_generate_v4())
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"<Customer id={self.id} name={self.name}>"


class InvoiceModel(Base):
    __tablename__ = "invoices"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, server_default=uuid_generate_v4())
    # Logical reference to customers.id; not enforced by a foreign key
    customer_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    # Smallest currency unit (cents)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"<Invoice id={self.id} customer_id={self.customer_id} amount={self.amount} status={self.status}>"


class RevenueModel(Base):
    __tablename__ = "revenue"

    month: Mapped[str] = mapped_column(String(4), unique=True, nullable=False)
    revenue: Mapped[int] = mapped_column(Integer, nullable=False)

    # The table has no primary key; map on the unique month column
    __mapper_args__ = {"primary_key": [month]}

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"<Revenue month={self.month} revenue={self.revenue}>"


__all__ = [
    "uuid_generate_v4",
    "UserModel",
    "CustomerModel",
    "InvoiceModel",
    "RevenueModel",
]
