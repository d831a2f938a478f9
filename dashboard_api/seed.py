"""Seed utilities for populating the dashboard store.

Contains the `Seeder` used by the `/seed` route and `scripts/seed_database.py`.
A run enables the UUID extension, creates missing tables and inserts the
placeholder fixtures, all inside one transaction. Re-running is a no-op
refresh: rows already present are skipped, never updated.
"""
from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence

from sqlalchemy import Date, Integer, String, Uuid, and_, bindparam, exists, func, insert, select, text
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.sql.schema import Table

from dashboard_api import models
from dashboard_api.auth import get_password_hash, make_password_context
from dashboard_api.database import Base
from dashboard_api.errors import SeedError
from dashboard_api.placeholder_data import FIXTURES
from dashboard_api.schemas import (
    CustomerFixture,
    FixtureSet,
    InvoiceFixture,
    RevenueFixture,
    SeedResult,
    UserFixture,
)

logger = logging.getLogger(__name__)

SEED_HASH_WORKERS = int(os.getenv("SEED_HASH_WORKERS", "4"))

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _conflict_insert(conn: Connection, table: Table):
    try:
        return _DIALECT_INSERTS[conn.dialect.name](table)
    except KeyError:
        raise SeedError(f"Dialect {conn.dialect.name!r} does not support ON CONFLICT inserts") from None


def _count(conn: Connection, table: Table) -> int:
    return conn.execute(select(func.count()).select_from(table)).scalar_one()


def _insert_batch(conn: Connection, table: Table, statement, rows: List[dict]) -> int:
    """Send all `rows` as a single executemany batch and return how many were inserted.

    The count is the table's row count after the batch minus before it. Under
    READ COMMITTED another run committing in between shifts that difference,
    so the figure is advisory and only used for logging and `SeedResult`.
    """
    if not rows:
        return 0
    before = _count(conn, table)
    conn.execute(statement, rows)
    return _count(conn, table) - before


def create_extensions(conn: Connection) -> None:
    if conn.dialect.name != "postgresql":
        logger.debug("Skipping uuid-ossp extension on dialect %s", conn.dialect.name)
        return
    conn.execute(text('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"'))


def create_tables(conn: Connection) -> None:
    # CREATE TABLE IF NOT EXISTS; existing tables are left untouched
    Base.metadata.create_all(bind=conn, checkfirst=True)


def seed_users(
    conn: Connection,
    users: Sequence[UserFixture],
    hash_password: Callable[[str], str] = get_password_hash,
    workers: int = SEED_HASH_WORKERS,
) -> int:
    table = models.UserModel.__table__
    with ThreadPoolExecutor(max_workers=max(1, workers)) as pool:
        hashed = list(pool.map(hash_password, [u.password for u in users]))

    rows = [
        {"id": u.id, "name": u.name, "email": u.email, "password": pw}
        for u, pw in zip(users, hashed)
    ]
    stmt = _conflict_insert(conn, table).on_conflict_do_nothing(index_elements=["id"])
    return _insert_batch(conn, table, stmt, rows)


def seed_customers(conn: Connection, customers: Sequence[CustomerFixture]) -> int:
    table = models.CustomerModel.__table__
    rows = [c.model_dump() for c in customers]
    stmt = _conflict_insert(conn, table).on_conflict_do_nothing(index_elements=["id"])
    return _insert_batch(conn, table, stmt, rows)


def invoice_insert_statement():
    """INSERT ... SELECT that adds one invoice unless its natural key is already stored."""
    table = models.InvoiceModel.__table__
    customer_id = bindparam("customer_id", type_=Uuid())
    amount = bindparam("amount", type_=Integer())
    status = bindparam("status", type_=String())
    day = bindparam("date", type_=Date())

    already_stored = exists().where(
        and_(
            table.c.customer_id == customer_id,
            table.c.amount == amount,
            table.c.status == status,
            table.c.date == day,
        )
    )
    candidate = select(customer_id, amount, status, day).where(~already_stored)
    return insert(table).from_select(["customer_id", "amount", "status", "date"], candidate)


def seed_invoices(conn: Connection, invoices: Sequence[InvoiceFixture]) -> int:
    """Insert invoices whose (customer_id, amount, status, date) is not stored yet.

    Invoice ids are generated by the store, so an id conflict can never occur;
    the natural key is what keeps repeated runs from duplicating invoices.
    Rows are checked one at a time within the batch, so two fixtures sharing a
    natural key collapse into a single invoice even on the first run.
    """
    table = models.InvoiceModel.__table__
    rows = [
        {"customer_id": i.customer_id, "amount": i.amount, "status": i.status.value, "date": i.date}
        for i in invoices
    ]
    return _insert_batch(conn, table, invoice_insert_statement(), rows)


def seed_revenue(conn: Connection, revenue: Sequence[RevenueFixture]) -> int:
    table = models.RevenueModel.__table__
    rows = [r.model_dump() for r in revenue]
    stmt = _conflict_insert(conn, table).on_conflict_do_nothing(index_elements=["month"])
    return _insert_batch(conn, table, stmt, rows)


class Seeder:
    """Ensure the dashboard schema exists and the fixture rows are present exactly once.

    The engine is owned by the caller; the seeder only borrows one connection
    for the duration of `seed()`. Steps run sequentially inside a single
    transaction, so a failure in any step leaves no rows behind.
    """

    def __init__(
        self,
        engine: Engine,
        fixtures: Optional[FixtureSet] = None,
        rounds: Optional[int] = None,
        hash_workers: int = SEED_HASH_WORKERS,
    ) -> None:
        self.engine = engine
        self.fixtures = fixtures if fixtures is not None else FIXTURES
        self.password_context = make_password_context(rounds)
        self.hash_workers = hash_workers

    def _hash_password(self, password: str) -> str:
        return get_password_hash(password, context=self.password_context)

    def seed(self) -> SeedResult:
        """Run every step in one transaction and return the rows inserted per entity.

        Raises SeedError (chaining the original exception) after the
        transaction has been rolled back.
        """
        fixtures = self.fixtures
        try:
            with self.engine.begin() as conn:
                create_extensions(conn)
                create_tables(conn)
                logger.info("Schema ready")

                inserted_users = seed_users(conn, fixtures.users, self._hash_password, self.hash_workers)
                logger.info("Seeded users: %d of %d inserted", inserted_users, len(fixtures.users))

                inserted_customers = seed_customers(conn, fixtures.customers)
                logger.info("Seeded customers: %d of %d inserted", inserted_customers, len(fixtures.customers))

                inserted_invoices = seed_invoices(conn, fixtures.invoices)
                logger.info("Seeded invoices: %d of %d inserted", inserted_invoices, len(fixtures.invoices))

                inserted_revenue = seed_revenue(conn, fixtures.revenue)
                logger.info("Seeded revenue: %d of %d inserted", inserted_revenue, len(fixtures.revenue))
        except Exception as exc:
            logger.exception("Seeding error: %s", exc)
            raise SeedError("Failed to seed database") from exc

        return SeedResult(
            users=inserted_users,
            customers=inserted_customers,
            invoices=inserted_invoices,
            revenue=inserted_revenue,
        )


__all__ = [
    "Seeder",
    "create_extensions",
    "create_tables",
    "seed_users",
    "seed_customers",
    "invoice_insert_statement",
    "seed_invoices",
    "seed_revenue",
]
