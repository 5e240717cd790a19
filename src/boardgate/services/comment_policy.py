"""CommentPolicyService: the single authority for "may this user comment here".

Decision order:

    board exists? → resolve policy → disabled / anyone short-circuit
    → board membership → workspace configured? → workspace membership

Denials come back as :class:`PolicyDecision` values. Storage failures are
raised from :meth:`evaluate` and reported as ``STORAGE_ERROR`` by
:meth:`check`; they are never turned into a denial.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from boardgate.domain.boards import Board
from boardgate.domain.policy import CommentPolicy, DenialReason, PolicyDecision
from boardgate.infrastructure.errors import StorageError
from boardgate.services.base import BaseService
from boardgate.services.result import ServiceError, ServiceResult
from boardgate.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from boardgate.services.lookups import BoardStore

log = structlog.get_logger(__name__)


class CommentPolicyService(BaseService):
    """Evaluates a board's comment policy against a user's memberships."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def evaluate(self, board_id: str, user_id: str) -> PolicyDecision:
        """Return the verdict for *user_id* commenting on *board_id*.

        Lookups are issued one at a time and only when an earlier step
        has not already decided. Raises StorageError if a lookup fails.
        """
        with trace_span("find_board"):
            board = self._store.find_board_by_id(board_id)
        if board is None:
            decision = PolicyDecision.deny(DenialReason.BOARD_NOT_FOUND)
        else:
            decision = self._decide(board, user_id)

        log.debug(
            "comment_policy.decision",
            board_id=board_id,
            user_id=user_id,
            allowed=decision.allowed,
            reason=decision.reason,
        )
        return decision

    @traced
    def check(self, board_id: str, user_id: str) -> ServiceResult:
        """Wrap :meth:`evaluate` in a ServiceResult.

        Every verdict, allow or deny, is ``ok=True``. Only a storage
        failure yields ``ok=False``.
        """
        op = "check_comment_permission"
        try:
            decision = self.evaluate(board_id, user_id)
        except StorageError as exc:
            log.warning(
                "comment_policy.storage_error",
                board_id=board_id,
                user_id=user_id,
                operation=exc.operation,
                exc_info=True,
            )
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="STORAGE_ERROR",
                    message="Could not evaluate comment permission",
                    detail={"operation": exc.operation},
                ),
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "board_id": board_id,
                "user_id": user_id,
                "allowed": decision.allowed,
                "reason": str(decision.reason) if decision.reason else None,
            },
        )

    # ------------------------------------------------------------------
    # Decision tree
    # ------------------------------------------------------------------

    def _decide(self, board: Board, user_id: str) -> PolicyDecision:
        match board.policy:
            case CommentPolicy.DISABLED:
                return PolicyDecision.deny(DenialReason.COMMENTS_DISABLED)
            case CommentPolicy.ANYONE:
                return PolicyDecision.allow()
            case CommentPolicy.MEMBERS:
                if self._is_board_member(board.id, user_id):
                    return PolicyDecision.allow()
                return PolicyDecision.deny(DenialReason.NOT_BOARD_MEMBER)
            case CommentPolicy.WORKSPACE:
                return self._decide_workspace(board, user_id)
            case _:
                log.warning(
                    "comment_policy.invalid_configuration",
                    board_id=board.id,
                    stored_policy=board.comment_policy,
                )
                return PolicyDecision.deny(DenialReason.INVALID_POLICY)

    def _decide_workspace(self, board: Board, user_id: str) -> PolicyDecision:
        # Board membership satisfies the broader workspace policy.
        if self._is_board_member(board.id, user_id):
            return PolicyDecision.allow()
        if not board.workspace_id:
            return PolicyDecision.deny(DenialReason.NO_WORKSPACE)
        with trace_span("find_workspace_membership"):
            membership = self._store.find_workspace_membership(board.workspace_id, user_id)
        if membership is None:
            return PolicyDecision.deny(DenialReason.NOT_WORKSPACE_MEMBER)
        return PolicyDecision.allow()

    def _is_board_member(self, board_id: str, user_id: str) -> bool:
        with trace_span("find_board_membership"):
            return self._store.find_board_membership(board_id, user_id) is not None


def check_comment_permission(store: BoardStore, board_id: str, user_id: str) -> dict[str, object]:
    """Request-layer entry point: ``{"allowed": bool}`` plus ``"reason"`` on denial.

    Raises StorageError when the verdict could not be computed.
    """
    decision = CommentPolicyService(store).evaluate(board_id, user_id)
    return decision.to_payload()
