import types

import pytest
from sqlalchemy import create_mock_engine
from sqlalchemy.dialects.postgresql import psycopg
from sqlalchemy.schema import CreateTable

from dashboard_api import seed as seed_module
from dashboard_api.errors import SeedError
from dashboard_api.models import CustomerModel, InvoiceModel, RevenueModel, UserModel
from dashboard_api.seed import create_extensions, invoice_insert_statement


def _pg_dialect():
    return psycopg.dialect()


def _ddl(model) -> str:
    return " ".join(str(CreateTable(model.__table__).compile(dialect=_pg_dialect())).split())


def test_create_extensions_issues_uuid_ossp_on_postgres():
    statements = []

    def executor(sql, *multiparams, **params):
        statements.append(str(sql.compile(dialect=engine.dialect)))

    engine = create_mock_engine("postgresql+psycopg://", executor)
    create_extensions(engine)

    assert statements == ['CREATE EXTENSION IF NOT EXISTS "uuid-ossp"']


def test_postgres_create_all_renders_every_table():
    statements = []

    def executor(sql, *multiparams, **params):
        statements.append(" ".join(str(sql.compile(dialect=engine.dialect)).split()))

    engine = create_mock_engine("postgresql+psycopg://", executor)
    UserModel.metadata.create_all(engine, checkfirst=False)

    created = [s for s in statements if s.startswith("CREATE TABLE")]
    assert {s.split()[2] for s in created} == {"users", "customers", "invoices", "revenue"}


@pytest.mark.parametrize("model", [UserModel, CustomerModel, InvoiceModel])
def test_postgres_primary_keys_default_to_uuid_generate_v4(model):
    assert "id UUID DEFAULT uuid_generate_v4() NOT NULL" in _ddl(model)


def test_postgres_users_email_is_unique_text():
    ddl = _ddl(UserModel)
    assert "email TEXT NOT NULL" in ddl
    assert "UNIQUE (email)" in ddl


def test_postgres_revenue_month_is_unique_varchar4():
    ddl = _ddl(RevenueModel)
    assert "month VARCHAR(4) NOT NULL" in ddl
    assert "UNIQUE (month)" in ddl
    assert "PRIMARY KEY" not in ddl


def test_postgres_invoice_customer_id_has_no_foreign_key():
    ddl = _ddl(InvoiceModel)
    assert "customer_id UUID NOT NULL" in ddl
    assert "FOREIGN KEY" not in ddl


def test_invoice_insert_statement_casts_params_on_postgres():
    sql = " ".join(str(invoice_insert_statement().compile(dialect=_pg_dialect())).split())

    assert sql.startswith("INSERT INTO invoices (")
    assert "SELECT %(customer_id)s::UUID" in sql
    assert "%(customer_id)s::UUID" in sql
    assert "%(status)s::VARCHAR" in sql
    assert "%(date)s::DATE" in sql
    assert "EXISTS (SELECT" in sql
    assert "NOT" in sql


def test_conflict_insert_rejects_unsupported_dialect():
    conn = types.SimpleNamespace(dialect=types.SimpleNamespace(name="mysql"))

    with pytest.raises(SeedError, match="mysql"):
        seed_module._conflict_insert(conn, UserModel.__table__)


def test_conflict_insert_uses_postgres_on_conflict():
    conn = types.SimpleNamespace(dialect=_pg_dialect())
    stmt = seed_module._conflict_insert(conn, RevenueModel.__table__).on_conflict_do_nothing(index_elements=["month"])

    sql = str(stmt.compile(dialect=_pg_dialect()))
    assert "ON CONFLICT (month) DO NOTHING" in sql
