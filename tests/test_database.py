import pytest

from dashboard_api import database
from dashboard_api.errors import SeedError, StoreConfigurationError


@pytest.mark.parametrize(
    "url, expected",
    [
        ("postgres://u:p@db.example.com/app", "postgresql+psycopg://u:p@db.example.com/app"),
        ("postgresql://u:p@db.example.com/app", "postgresql+psycopg://u:p@db.example.com/app"),
        ("postgresql+psycopg://u:p@db.example.com/app", "postgresql+psycopg://u:p@db.example.com/app"),
        (" sqlite:///./local.db ", "sqlite:///./local.db"),
    ],
)
def test_normalize_database_url(url, expected):
    assert database.normalize_database_url(url) == expected


def test_postgres_connections_require_ssl():
    assert database._connect_args_for("postgresql+psycopg://u:p@h/db") == {"sslmode": "require"}


def test_sqlite_connections_allow_threads():
    assert database._connect_args_for("sqlite:///./local.db") == {"check_same_thread": False}


@pytest.mark.parametrize("url", [None, "", "   "])
def test_missing_url_is_a_configuration_error(url):
    with pytest.raises(StoreConfigurationError):
        database.create_store_engine(url)


def test_unparseable_url_is_a_configuration_error():
    with pytest.raises(StoreConfigurationError):
        database.create_store_engine("not a url")


def test_configuration_error_is_a_seed_error():
    assert issubclass(StoreConfigurationError, SeedError)


def test_store_engine_reads_postgres_url_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("POSTGRES_URL", f"sqlite:///{tmp_path / 'env.db'}")

    with database.store_engine() as engine:
        assert engine.dialect.name == "sqlite"
        assert engine.url.database.endswith("env.db")


def test_postgres_engine_uses_psycopg_driver():
    engine = database.create_store_engine("postgres://u:p@db.example.com/app")
    try:
        assert engine.dialect.name == "postgresql"
        assert engine.dialect.driver == "psycopg"
    finally:
        engine.dispose()
