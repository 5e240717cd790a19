"""BoardAdminService: the writes that seed boards, workspaces and memberships.

Comment policies are checked here on write, so a stored value outside the
assignable modes can only come from an out-of-band edit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from boardgate.domain.policy import ASSIGNABLE_POLICIES
from boardgate.infrastructure.errors import StorageError
from boardgate.services.result import ServiceError, ServiceResult
from boardgate.services.telemetry import traced

if TYPE_CHECKING:
    from boardgate.infrastructure.repositories.boards import BoardRepository

log = structlog.get_logger(__name__)


def _storage_failure(op: str, exc: StorageError) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code="STORAGE_ERROR",
            message=f"Storage operation failed: {exc.operation}",
            detail={"operation": exc.operation},
        ),
    )


def _not_found(op: str, kind: str, ident: str) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="NOT_FOUND", message=f"No {kind} found with ID: {ident}"),
    )


class BoardAdminService:
    """Administrative writes against a :class:`BoardRepository`."""

    def __init__(self, repository: BoardRepository) -> None:
        self._repo = repository

    @traced
    def add_workspace(self, workspace_id: str, *, title: str = "") -> ServiceResult:
        op = "add_workspace"
        try:
            self._repo.add_workspace(workspace_id, title=title)
        except StorageError as exc:
            return _storage_failure(op, exc)
        log.info("workspace.added", workspace_id=workspace_id)
        return ServiceResult(ok=True, op=op, data={"id": workspace_id, "title": title})

    @traced
    def add_board(
        self,
        board_id: str,
        *,
        title: str = "",
        comment_policy: str | None = None,
        workspace_id: str | None = None,
    ) -> ServiceResult:
        """Create a board. ``comment_policy=None`` leaves it unset (members)."""
        op = "add_board"
        assignable = sorted(p.value for p in ASSIGNABLE_POLICIES)
        if comment_policy is not None and comment_policy not in assignable:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_POLICY",
                    message=f"Invalid comment policy: {comment_policy!r}",
                    detail={"allowed": assignable},
                ),
            )

        try:
            if workspace_id is not None and not self._repo.workspace_exists(workspace_id):
                return _not_found(op, "workspace", workspace_id)
            self._repo.add_board(
                board_id,
                title=title,
                comment_policy=comment_policy,
                workspace_id=workspace_id,
            )
        except StorageError as exc:
            return _storage_failure(op, exc)

        log.info("board.added", board_id=board_id, comment_policy=comment_policy)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": board_id,
                "title": title,
                "comment_policy": comment_policy,
                "workspace_id": workspace_id,
            },
        )

    @traced
    def add_board_member(self, board_id: str, user_id: str) -> ServiceResult:
        op = "add_board_member"
        try:
            if self._repo.find_board_by_id(board_id) is None:
                return _not_found(op, "board", board_id)
            self._repo.add_board_member(board_id, user_id)
        except StorageError as exc:
            return _storage_failure(op, exc)
        return ServiceResult(ok=True, op=op, data={"board_id": board_id, "user_id": user_id})

    @traced
    def add_workspace_member(self, workspace_id: str, user_id: str) -> ServiceResult:
        op = "add_workspace_member"
        try:
            if not self._repo.workspace_exists(workspace_id):
                return _not_found(op, "workspace", workspace_id)
            self._repo.add_workspace_member(workspace_id, user_id)
        except StorageError as exc:
            return _storage_failure(op, exc)
        return ServiceResult(
            ok=True, op=op, data={"workspace_id": workspace_id, "user_id": user_id}
        )
