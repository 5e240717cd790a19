"""CommentGate: turns a comment-permission verdict into an HTTP outcome."""

from __future__ import annotations

from typing import TYPE_CHECKING

from boardgate.services.comment_policy import CommentPolicyService
from boardgate.web.responses import FORBIDDEN, INTERNAL_SERVER_ERROR, ServiceResponse

if TYPE_CHECKING:
    from boardgate.services.lookups import BoardStore


class CommentGate:
    """Used by the comment create, update and delete handlers before any write.

    ``require`` returns None when the user may comment, otherwise the
    response the handler should send instead: 403 with the denial reason,
    or 500 when the verdict could not be computed.
    """

    def __init__(self, store: BoardStore) -> None:
        self._policy = CommentPolicyService(store)

    def require(self, board_id: str, user_id: str) -> ServiceResponse | None:
        result = self._policy.check(board_id, user_id)
        if not result.ok:
            assert result.error is not None
            return ServiceResponse.failure(result.error.message, INTERNAL_SERVER_ERROR)
        if result.data["allowed"]:
            return None
        return ServiceResponse.failure(result.data["reason"], FORBIDDEN)
