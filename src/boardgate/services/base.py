"""BaseService: shared foundation for store-backed services.

Every such service receives a :class:`~boardgate.services.lookups.BoardStore`
at construction time and reads through it on every call. Services hold no
other state, so one instance may serve concurrent requests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from boardgate.services.lookups import BoardStore


class BaseService:
    """Abstract base for service classes backed by board storage.

    Usage::

        class CommentPolicyService(BaseService):
            def evaluate(self, board_id: str, user_id: str) -> PolicyDecision:
                board = self._store.find_board_by_id(board_id)
                ...
    """

    def __init__(self, store: BoardStore) -> None:
        self._store = store
