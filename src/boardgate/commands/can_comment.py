"""Command: evaluate a board's comment policy for one user."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from boardgate.commands._base import BoardgateCommand

if TYPE_CHECKING:
    from boardgate.commands._context import AppContext


@click.command(
    "can-comment",
    cls=BoardgateCommand,
    examples="""\
  boardgate can-comment b1 alice
  boardgate --json can-comment b1 alice
  boardgate -q can-comment b1 alice""",
)
@click.argument("board_id")
@click.argument("user_id")
@click.pass_obj
def can_comment(app: AppContext, board_id: str, user_id: str) -> None:
    """Report whether USER_ID may comment on BOARD_ID.

    A denial is a normal answer (exit 0); only a storage failure exits 1.
    """
    from boardgate.services.comment_policy import CommentPolicyService

    app.emit(CommentPolicyService(app.repository).check(board_id, user_id))
