"""SQL-backed board and membership repository."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from boardgate.domain.boards import Board, BoardMembership, WorkspaceMembership
from boardgate.infrastructure.database.schema import (
    board_members,
    boards,
    workspace_members,
    workspaces,
)
from boardgate.infrastructure.errors import StorageError

logger = logging.getLogger(__name__)


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    """Re-raise driver failures as StorageError."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.debug("Storage operation %s failed", operation, exc_info=True)
        raise StorageError(operation, str(exc.__class__.__name__)) from exc


class BoardRepository:
    """Point lookups for the policy evaluator, plus the writes that seed them.

    Each call opens its own connection and reads current state.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def find_board_by_id(self, board_id: str) -> Board | None:
        stmt = select(boards.c.id, boards.c.comment_policy, boards.c.workspace_id).where(
            boards.c.id == board_id
        )
        with _storage_errors("find_board_by_id"), self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            return None
        return Board(
            id=row["id"],
            comment_policy=row["comment_policy"],
            workspace_id=row["workspace_id"],
        )

    def find_board_membership(self, board_id: str, user_id: str) -> BoardMembership | None:
        stmt = select(board_members.c.board_id).where(
            board_members.c.board_id == board_id,
            board_members.c.user_id == user_id,
        )
        with _storage_errors("find_board_membership"), self._engine.connect() as conn:
            row = conn.execute(stmt).first()
        if row is None:
            return None
        return BoardMembership(board_id=board_id, user_id=user_id)

    def find_workspace_membership(
        self, workspace_id: str, user_id: str
    ) -> WorkspaceMembership | None:
        stmt = select(workspace_members.c.workspace_id).where(
            workspace_members.c.workspace_id == workspace_id,
            workspace_members.c.user_id == user_id,
        )
        with _storage_errors("find_workspace_membership"), self._engine.connect() as conn:
            row = conn.execute(stmt).first()
        if row is None:
            return None
        return WorkspaceMembership(workspace_id=workspace_id, user_id=user_id)

    def workspace_exists(self, workspace_id: str) -> bool:
        stmt = select(workspaces.c.id).where(workspaces.c.id == workspace_id)
        with _storage_errors("workspace_exists"), self._engine.connect() as conn:
            return conn.execute(stmt).first() is not None

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def add_workspace(self, workspace_id: str, *, title: str = "") -> None:
        with _storage_errors("add_workspace"), self._engine.begin() as conn:
            conn.execute(insert(workspaces).values(id=workspace_id, title=title))

    def add_board(
        self,
        board_id: str,
        *,
        title: str = "",
        comment_policy: str | None = None,
        workspace_id: str | None = None,
    ) -> None:
        values = {
            "id": board_id,
            "title": title,
            "comment_policy": comment_policy,
            "workspace_id": workspace_id,
        }
        with _storage_errors("add_board"), self._engine.begin() as conn:
            conn.execute(insert(boards).values(**values))

    def add_board_member(self, board_id: str, user_id: str) -> None:
        with _storage_errors("add_board_member"), self._engine.begin() as conn:
            conn.execute(insert(board_members).values(board_id=board_id, user_id=user_id))

    def add_workspace_member(self, workspace_id: str, user_id: str) -> None:
        with _storage_errors("add_workspace_member"), self._engine.begin() as conn:
            conn.execute(
                insert(workspace_members).values(workspace_id=workspace_id, user_id=user_id)
            )
