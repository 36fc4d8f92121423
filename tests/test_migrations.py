# tests/test_migrations.py
"""The Alembic history must build the same tables the models declare."""

from pathlib import Path

import pytest
from sqlalchemy import create_engine, inspect

from tech_news.db.session import Base
from tech_news.scripts.sync_db import DEFAULT_ALEMBIC_INI, main, run_upgrade_head


@pytest.fixture()
def migrated_url(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    monkeypatch.setenv("ALEMBIC_URL", url)
    run_upgrade_head(DEFAULT_ALEMBIC_INI, url)
    return url


def test_alembic_ini_ships_with_the_project() -> None:
    assert DEFAULT_ALEMBIC_INI.is_file()


def test_upgrade_head_creates_model_tables(migrated_url: str) -> None:
    engine = create_engine(migrated_url)
    try:
        inspector = inspect(engine)
        tables = set(inspector.get_table_names()) - {"alembic_version"}
        assert tables == set(Base.metadata.tables)
        for name, table in Base.metadata.tables.items():
            columns = {col["name"] for col in inspector.get_columns(name)}
            assert columns == {col.name for col in table.columns}
    finally:
        engine.dispose()


def test_migrate_accepts_an_async_url(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ALEMBIC_URL", raising=False)
    db_path = tmp_path / "cli.db"
    assert main(["--migrate", "--url", f"sqlite+aiosqlite:///{db_path}"]) == 0

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        assert "users" in inspect(engine).get_table_names()
    finally:
        engine.dispose()


def test_migrate_without_alembic_ini_fails_cleanly(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    missing = tmp_path / "alembic.ini"
    assert main(["--migrate", "--alembic-ini", str(missing)]) == 1
    err = capsys.readouterr().err
    assert "[sync_db] ERROR" in err
    assert "--alembic-ini" in err
