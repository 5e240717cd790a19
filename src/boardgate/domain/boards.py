"""Board and membership entities as read by the policy evaluator."""

from __future__ import annotations

from pydantic import BaseModel

from boardgate.domain.policy import CommentPolicy, parse_comment_policy


class Board(BaseModel):
    """A board as stored.

    ``comment_policy`` holds the raw stored text so corrupted values stay
    representable; use :attr:`policy` for the resolved mode.
    """

    model_config = {"frozen": True}

    id: str
    comment_policy: str | None = None
    workspace_id: str | None = None

    @property
    def policy(self) -> CommentPolicy:
        return parse_comment_policy(self.comment_policy)


class BoardMembership(BaseModel):
    """Existence of this row makes the user a board member."""

    model_config = {"frozen": True}

    board_id: str
    user_id: str


class WorkspaceMembership(BaseModel):
    """Existence of this row makes the user a workspace member."""

    model_config = {"frozen": True}

    workspace_id: str
    user_id: str
