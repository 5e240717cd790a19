"""Command group: board administration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from boardgate.commands._base import BoardgateGroup
from boardgate.domain.policy import ASSIGNABLE_POLICIES

if TYPE_CHECKING:
    from boardgate.commands._context import AppContext

_POLICY_CHOICES = sorted(p.value for p in ASSIGNABLE_POLICIES)


@click.group(
    cls=BoardgateGroup,
    examples="""\
  boardgate board add b1 --policy workspace --workspace w1
  boardgate board add b2 --title Roadmap""",
)
def board() -> None:
    """Manage boards."""


@board.command()
@click.argument("board_id")
@click.option("--title", default="", help="Board title.")
@click.option(
    "--policy",
    "comment_policy",
    type=click.Choice(_POLICY_CHOICES),
    default=None,
    help="Comment policy (unset means members).",
)
@click.option("--workspace", "workspace_id", default=None, help="Owning workspace ID.")
@click.pass_obj
def add(
    app: AppContext,
    board_id: str,
    title: str,
    comment_policy: str | None,
    workspace_id: str | None,
) -> None:
    """Create a board."""
    from boardgate.services.boards import BoardAdminService

    app.emit(
        BoardAdminService(app.repository).add_board(
            board_id,
            title=title,
            comment_policy=comment_policy,
            workspace_id=workspace_id,
        )
    )
