import logging

from scripts import seed_database


def test_script_seeds_store(tmp_path, caplog):
    url = f"sqlite:///{tmp_path / 'cli.db'}"
    caplog.set_level(logging.INFO)

    assert seed_database.main(["--url", url, "--rounds", "4", "--workers", "2"]) == 0
    assert "Database seeded successfully" in caplog.text


def test_script_exits_non_zero_without_url(monkeypatch):
    monkeypatch.delenv("POSTGRES_URL", raising=False)

    assert seed_database.main(["--url", ""]) == 1


def test_script_exits_non_zero_when_store_unreachable(tmp_path):
    url = f"sqlite:///{tmp_path / 'missing' / 'cli.db'}"

    assert seed_database.main(["--url", url]) == 1
