"""Request schemas for the board product's endpoints.

``REQUEST_SCHEMAS`` maps the kebab-case names the CLI accepts to the models.
"""

from __future__ import annotations

from boardgate.schemas.auth import LoginRequest, RegisterRequest
from boardgate.schemas.boards import UpdateBoardSettingsRequest
from boardgate.schemas.comments import (
    CommentIdRequest,
    CreateCommentRequest,
    ListCommentsRequest,
    UpdateCommentRequest,
)
from boardgate.schemas.lists import CreateListRequest, MoveListRequest, RenameListRequest
from boardgate.schemas.workspaces import AddWorkspaceMemberRequest, CreateWorkspaceRequest

REQUEST_SCHEMAS: dict[str, type] = {
    "create-comment": CreateCommentRequest,
    "update-comment": UpdateCommentRequest,
    "delete-comment": CommentIdRequest,
    "list-comments": ListCommentsRequest,
    "update-board-settings": UpdateBoardSettingsRequest,
    "create-list": CreateListRequest,
    "rename-list": RenameListRequest,
    "move-list": MoveListRequest,
    "create-workspace": CreateWorkspaceRequest,
    "add-workspace-member": AddWorkspaceMemberRequest,
    "register": RegisterRequest,
    "login": LoginRequest,
}

__all__ = [
    "REQUEST_SCHEMAS",
    "AddWorkspaceMemberRequest",
    "CommentIdRequest",
    "CreateCommentRequest",
    "CreateListRequest",
    "CreateWorkspaceRequest",
    "ListCommentsRequest",
    "LoginRequest",
    "MoveListRequest",
    "RegisterRequest",
    "RenameListRequest",
    "UpdateBoardSettingsRequest",
    "UpdateCommentRequest",
]
