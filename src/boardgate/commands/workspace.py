"""Command group: workspace administration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from boardgate.commands._base import BoardgateGroup

if TYPE_CHECKING:
    from boardgate.commands._context import AppContext


@click.group(
    cls=BoardgateGroup,
    examples="""\
  boardgate workspace add w1 --title Engineering""",
)
def workspace() -> None:
    """Manage workspaces."""


@workspace.command()
@click.argument("workspace_id")
@click.option("--title", default="", help="Workspace title.")
@click.pass_obj
def add(app: AppContext, workspace_id: str, title: str) -> None:
    """Create a workspace."""
    from boardgate.services.boards import BoardAdminService

    app.emit(BoardAdminService(app.repository).add_workspace(workspace_id, title=title))
