"""Tests for BoardAdminService against a real SQLite repository."""

from __future__ import annotations

import pytest
from sqlalchemy.engine import Engine

from boardgate.infrastructure.repositories import BoardRepository
from boardgate.services.boards import BoardAdminService
from boardgate.services.comment_policy import CommentPolicyService


@pytest.fixture
def admin(repository: BoardRepository) -> BoardAdminService:
    return BoardAdminService(repository)


class TestAddWorkspace:
    def test_creates(self, admin: BoardAdminService, repository: BoardRepository) -> None:
        result = admin.add_workspace("ws-1", title="Engineering")
        assert result.ok is True
        assert result.data == {"id": "ws-1", "title": "Engineering"}
        assert repository.workspace_exists("ws-1")

    def test_duplicate_is_storage_error(self, admin: BoardAdminService) -> None:
        admin.add_workspace("ws-1")
        result = admin.add_workspace("ws-1")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "STORAGE_ERROR"
        assert result.error.detail == {"operation": "add_workspace"}


class TestAddBoard:
    def test_unset_policy(self, admin: BoardAdminService, repository: BoardRepository) -> None:
        result = admin.add_board("b-1", title="Roadmap")
        assert result.ok is True
        assert result.data["comment_policy"] is None
        board = repository.find_board_by_id("b-1")
        assert board is not None
        assert board.comment_policy is None

    def test_rejects_unassignable_policy(self, admin: BoardAdminService) -> None:
        result = admin.add_board("b-1", comment_policy="unknown")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_POLICY"
        assert result.error.detail["allowed"] == ["anyone", "disabled", "members", "workspace"]

    def test_missing_workspace(self, admin: BoardAdminService) -> None:
        result = admin.add_board("b-1", workspace_id="nope")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert result.error.message == "No workspace found with ID: nope"

    def test_with_workspace(self, admin: BoardAdminService) -> None:
        admin.add_workspace("ws-1")
        result = admin.add_board("b-1", comment_policy="workspace", workspace_id="ws-1")
        assert result.ok is True
        assert result.data["workspace_id"] == "ws-1"


class TestAddMembers:
    def test_board_member_requires_board(self, admin: BoardAdminService) -> None:
        result = admin.add_board_member("missing", "alice")
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"

    def test_workspace_member_requires_workspace(self, admin: BoardAdminService) -> None:
        result = admin.add_workspace_member("missing", "alice")
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"

    def test_duplicate_board_member(self, admin: BoardAdminService) -> None:
        admin.add_board("b-1")
        assert admin.add_board_member("b-1", "alice").ok
        result = admin.add_board_member("b-1", "alice")
        assert result.error is not None
        assert result.error.code == "STORAGE_ERROR"


class TestSeededEvaluation:
    def test_workspace_policy_end_to_end(
        self, admin: BoardAdminService, repository: BoardRepository
    ) -> None:
        admin.add_workspace("ws-1")
        admin.add_board("b-1", comment_policy="workspace", workspace_id="ws-1")
        admin.add_workspace_member("ws-1", "alice")
        policy = CommentPolicyService(repository)
        assert policy.evaluate("b-1", "alice").allowed is True
        assert policy.evaluate("b-1", "bob").reason == (
            "You must be a member of this board or its workspace to comment"
        )


class TestStorageFailure:
    def test_missing_tables_reported(self, tmp_path) -> None:
        from boardgate.infrastructure.database.engine import create_db_engine

        engine: Engine = create_db_engine(tmp_path / "empty.db")
        try:
            result = BoardAdminService(BoardRepository(engine)).add_board_member("b", "u")
        finally:
            engine.dispose()
        assert result.ok is False
        assert result.error is not None
        assert result.error.detail == {"operation": "find_board_by_id"}
