"""Storage capabilities the policy evaluator is built on.

Implementations return ``None`` for a missing row and raise
:class:`~boardgate.infrastructure.errors.StorageError` when the lookup
itself fails. They must read current state on every call.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from boardgate.domain.boards import Board, BoardMembership, WorkspaceMembership


@runtime_checkable
class BoardLookup(Protocol):
    def find_board_by_id(self, board_id: str) -> Board | None: ...


@runtime_checkable
class MembershipLookup(Protocol):
    def find_board_membership(self, board_id: str, user_id: str) -> BoardMembership | None: ...

    def find_workspace_membership(
        self, workspace_id: str, user_id: str
    ) -> WorkspaceMembership | None: ...


@runtime_checkable
class BoardStore(BoardLookup, MembershipLookup, Protocol):
    """Both capabilities from one collaborator, as the repositories provide."""
