"""Shared pytest fixtures for boardgate tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from boardgate.infrastructure.database.engine import init_database
from boardgate.infrastructure.repositories import BoardRepository, InMemoryBoardStore
from boardgate.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Generator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path / "boardgate.db")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def repository(db_engine: Engine) -> BoardRepository:
    return BoardRepository(db_engine)


@pytest.fixture
def store() -> InMemoryBoardStore:
    """Empty in-memory store; tests add the boards they need."""
    return InMemoryBoardStore()


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty temp directory with no inherited config.

    Use via ``@pytest.mark.usefixtures("_isolated_project")``.
    """
    monkeypatch.delenv("BOARDGATE_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _telemetry_off() -> Generator[None]:
    yield
    disable_telemetry()
