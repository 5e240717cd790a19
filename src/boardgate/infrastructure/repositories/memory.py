"""In-memory board store for tests and embedding without a database."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from boardgate.domain.boards import Board, BoardMembership, WorkspaceMembership
from boardgate.infrastructure.errors import StorageError


@dataclass
class InMemoryBoardStore:
    """Dict/set-backed implementation of the lookup capabilities.

    ``lookups`` counts calls per method. Setting ``fail_on`` to a method
    name makes that lookup raise StorageError.
    """

    boards: dict[str, Board] = field(default_factory=dict)
    board_members: set[tuple[str, str]] = field(default_factory=set)
    workspace_members: set[tuple[str, str]] = field(default_factory=set)
    lookups: Counter[str] = field(default_factory=Counter)
    fail_on: str | None = None

    def add_board(
        self,
        board_id: str,
        *,
        comment_policy: str | None = None,
        workspace_id: str | None = None,
    ) -> Board:
        board = Board(id=board_id, comment_policy=comment_policy, workspace_id=workspace_id)
        self.boards[board_id] = board
        return board

    def add_board_member(self, board_id: str, user_id: str) -> None:
        self.board_members.add((board_id, user_id))

    def add_workspace_member(self, workspace_id: str, user_id: str) -> None:
        self.workspace_members.add((workspace_id, user_id))

    def _record(self, operation: str) -> None:
        self.lookups[operation] += 1
        if self.fail_on == operation:
            raise StorageError(operation, "store unavailable")

    def find_board_by_id(self, board_id: str) -> Board | None:
        self._record("find_board_by_id")
        return self.boards.get(board_id)

    def find_board_membership(self, board_id: str, user_id: str) -> BoardMembership | None:
        self._record("find_board_membership")
        if (board_id, user_id) not in self.board_members:
            return None
        return BoardMembership(board_id=board_id, user_id=user_id)

    def find_workspace_membership(
        self, workspace_id: str, user_id: str
    ) -> WorkspaceMembership | None:
        self._record("find_workspace_membership")
        if (workspace_id, user_id) not in self.workspace_members:
            return None
        return WorkspaceMembership(workspace_id=workspace_id, user_id=user_id)
