"""Placeholder records used to populate the dashboard store.

The lists are read-only inputs to the seeder. Invoices reference customers by
id, so customer ids here are the ones invoices are expected to point at.
"""
from __future__ import annotations

from dashboard_api.schemas import (
    CustomerFixture,
    FixtureSet,
    InvoiceFixture,
    RevenueFixture,
    UserFixture,
)

users = [
    UserFixture(
        id="410544b2-4001-4271-9855-fec4b6a6442a",
        name="User",
        email="user@nextmail.com",
        password="123456",
    ),
]

customers = [
    CustomerFixture(
        id="d6e15727-9fe1-4961-8c5b-ea44a9bd81aa",
        name="Evil Rabbit",
        email="evil@rabbit.com",
        image_url="/customers/evil-rabbit.png",
    ),
    CustomerFixture(
        id="3958dc9e-712f-4377-85e9-fec4b6a6442a",
        name="Delba de Oliveira",
        email="delba@oliveira.com",
        image_url="/customers/delba-de-oliveira.png",
    ),
    CustomerFixture(
        id="3958dc9e-742f-4377-85e9-fec4b6a6442a",
        name="Lee Robinson",
        email="lee@robinson.com",
        image_url="/customers/lee-robinson.png",
    ),
    CustomerFixture(
        id="76d65c26-f784-44a2-ac19-586678f7c2f2",
        name="Michael Novotny",
        email="michael@novotny.com",
        image_url="/customers/michael-novotny.png",
    ),
    CustomerFixture(
        id="CC27C14A-0ACF-4F4A-A6C9-D45682C144B9",
        name="Amy Burns",
        email="amy@burns.com",
        image_url="/customers/amy-burns.png",
    ),
    CustomerFixture(
        id="13D07535-C59E-4157-A011-F8D2EF4E0CBB",
        name="Balazs Orban",
        email="balazs@orban.com",
        image_url="/customers/balazs-orban.png",
    ),
]

_invoice_rows = [
    # (customer index, amount in cents, status, date)
    (0, 15795, "pending", "2022-12-06"),
    (1, 20348, "pending", "2022-11-14"),
    (4, 3040, "paid", "2022-10-29"),
    (3, 44800, "paid", "2023-09-10"),
    (5, 34577, "pending", "2023-08-05"),
    (2, 54246, "pending", "2023-07-16"),
    (0, 666, "pending", "2023-06-27"),
    (3, 32545, "paid", "2023-06-09"),
    (4, 1250, "paid", "2023-06-17"),
    (5, 8546, "paid", "2023-06-07"),
    (1, 500, "paid", "2023-08-19"),
    (5, 8945, "paid", "2023-06-03"),
    (2, 1000, "paid", "2022-06-05"),
]

invoices = [
    InvoiceFixture(customer_id=customers[idx].id, amount=amount, status=status, date=day)
    for idx, amount, status, day in _invoice_rows
]

revenue = [
    RevenueFixture(month="Jan", revenue=2000),
    RevenueFixture(month="Feb", revenue=1800),
    RevenueFixture(month="Mar", revenue=2200),
    RevenueFixture(month="Apr", revenue=2500),
    RevenueFixture(month="May", revenue=2300),
    RevenueFixture(month="Jun", revenue=3200),
    RevenueFixture(month="Jul", revenue=3500),
    RevenueFixture(month="Aug", revenue=3700),
    RevenueFixture(month="Sep", revenue=2500),
    RevenueFixture(month="Oct", revenue=2800),
    RevenueFixture(month="Nov", revenue=3000),
    RevenueFixture(month="Dec", revenue=4800),
]

FIXTURES = FixtureSet(users=users, customers=customers, invoices=invoices, revenue=revenue)


__all__ = ["users", "customers", "invoices", "revenue", "FIXTURES"]
