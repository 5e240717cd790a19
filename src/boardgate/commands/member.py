"""Command group: board and workspace memberships."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from boardgate.commands._base import BoardgateGroup

if TYPE_CHECKING:
    from boardgate.commands._context import AppContext


@click.group(
    cls=BoardgateGroup,
    examples="""\
  boardgate member add --board b1 alice
  boardgate member add --workspace w1 bob""",
)
def member() -> None:
    """Manage memberships."""


@member.command()
@click.argument("user_id")
@click.option("--board", "board_id", default=None, help="Add the user to this board.")
@click.option(
    "--workspace", "workspace_id", default=None, help="Add the user to this workspace."
)
@click.pass_obj
def add(app: AppContext, user_id: str, board_id: str | None, workspace_id: str | None) -> None:
    """Add USER_ID to exactly one board or workspace."""
    if (board_id is None) == (workspace_id is None):
        raise click.UsageError("Pass exactly one of --board or --workspace.")

    from boardgate.services.boards import BoardAdminService

    svc = BoardAdminService(app.repository)
    if board_id is not None:
        app.emit(svc.add_board_member(board_id, user_id))
    else:
        assert workspace_id is not None
        app.emit(svc.add_workspace_member(workspace_id, user_id))
