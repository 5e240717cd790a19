"""SQLite database engine and board schema via SQLAlchemy Core."""

from boardgate.infrastructure.database.engine import create_db_engine, init_database
from boardgate.infrastructure.database.schema import (
    board_members,
    boards,
    metadata,
    workspace_members,
    workspaces,
)

__all__ = [
    "board_members",
    "boards",
    "create_db_engine",
    "init_database",
    "metadata",
    "workspace_members",
    "workspaces",
]
