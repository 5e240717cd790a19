"""Comment policy modes, verdicts and denial reasons.

A board stores its comment policy as free text. Reading it back goes
through :func:`parse_comment_policy`, which maps an unset value to the
``members`` default and anything unrecognised to :attr:`CommentPolicy.UNKNOWN`
so the evaluator can deny it explicitly.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, model_validator


class CommentPolicy(StrEnum):
    """Who may comment on a board."""

    DISABLED = "disabled"
    ANYONE = "anyone"
    MEMBERS = "members"
    WORKSPACE = "workspace"
    UNKNOWN = "unknown"


DEFAULT_COMMENT_POLICY = CommentPolicy.MEMBERS

# Modes a board administrator may store. UNKNOWN is read-side only.
ASSIGNABLE_POLICIES: frozenset[CommentPolicy] = frozenset(
    {
        CommentPolicy.DISABLED,
        CommentPolicy.ANYONE,
        CommentPolicy.MEMBERS,
        CommentPolicy.WORKSPACE,
    }
)


class DenialReason(StrEnum):
    """The fixed set of reasons a verdict can carry."""

    BOARD_NOT_FOUND = "Board not found"
    COMMENTS_DISABLED = "Commenting is disabled on this board"
    NOT_BOARD_MEMBER = "You must be a member of this board to comment"
    NO_WORKSPACE = "Board has no workspace configured"
    NOT_WORKSPACE_MEMBER = "You must be a member of this board or its workspace to comment"
    INVALID_POLICY = "Invalid board comment policy configuration"


def parse_comment_policy(raw: str | None) -> CommentPolicy:
    """Resolve a stored policy value.

    ``None`` means the board never had a policy set and falls back to
    :data:`DEFAULT_COMMENT_POLICY`. Any other value that is not exactly one
    of the assignable modes (empty string, wrong case, typos) is UNKNOWN.
    """
    if raw is None:
        return DEFAULT_COMMENT_POLICY
    try:
        policy = CommentPolicy(raw)
    except ValueError:
        return CommentPolicy.UNKNOWN
    if policy not in ASSIGNABLE_POLICIES:
        return CommentPolicy.UNKNOWN
    return policy


class PolicyDecision(BaseModel):
    """Verdict of a comment-permission check.

    ``reason`` is set if and only if the verdict is a denial.
    """

    model_config = {"frozen": True}

    allowed: bool
    reason: DenialReason | None = None

    @model_validator(mode="after")
    def _reason_matches_verdict(self) -> PolicyDecision:
        if self.allowed and self.reason is not None:
            raise ValueError("an allowed decision carries no reason")
        if not self.allowed and self.reason is None:
            raise ValueError("a denied decision must carry a reason")
        return self

    @classmethod
    def allow(cls) -> PolicyDecision:
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: DenialReason) -> PolicyDecision:
        return cls(allowed=False, reason=reason)

    def to_payload(self) -> dict[str, object]:
        """Request-layer shape: ``reason`` only present on denial."""
        if self.allowed:
            return {"allowed": True}
        return {"allowed": False, "reason": str(self.reason)}
