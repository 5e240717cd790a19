"""Tests for database engine setup and initialization."""

from pathlib import Path

from sqlalchemy import inspect, text

from boardgate.infrastructure.database.engine import create_db_engine, init_database


class TestCreateDbEngine:
    def test_wal_mode_enabled(self, tmp_path: Path) -> None:
        engine = create_db_engine(tmp_path / "test.db")
        with engine.connect() as conn:
            assert conn.execute(text("PRAGMA journal_mode")).scalar() == "wal"
        engine.dispose()

    def test_foreign_keys_enabled(self, tmp_path: Path) -> None:
        engine = create_db_engine(tmp_path / "test.db")
        with engine.connect() as conn:
            assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1
        engine.dispose()


class TestInitDatabase:
    def test_creates_parent_directory(self, tmp_path: Path) -> None:
        db_path = tmp_path / ".boardgate" / "boardgate.db"
        init_database(db_path).dispose()
        assert db_path.exists()

    def test_creates_all_tables(self, tmp_path: Path) -> None:
        engine = init_database(tmp_path / "boardgate.db")
        table_names = set(inspect(engine).get_table_names())
        engine.dispose()
        assert {"workspaces", "boards", "board_members", "workspace_members"} <= table_names

    def test_idempotent(self, tmp_path: Path) -> None:
        db_path = tmp_path / "boardgate.db"
        init_database(db_path).dispose()
        engine = init_database(db_path)
        with engine.connect() as conn:
            assert conn.execute(text("SELECT count(*) FROM boards")).scalar() == 0
        engine.dispose()
