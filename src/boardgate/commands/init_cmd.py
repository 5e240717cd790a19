"""Command: create the board database."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from boardgate.commands._base import BoardgateCommand
from boardgate.services.result import ServiceResult

if TYPE_CHECKING:
    from boardgate.commands._context import AppContext


@click.command(
    cls=BoardgateCommand,
    examples="""\
  boardgate init
  boardgate -c ./boardgate.toml init""",
)
@click.pass_obj
def init(app: AppContext) -> None:
    """Create the database and its tables (idempotent)."""
    from boardgate.infrastructure.database.engine import init_database

    init_database(app.settings.db_path).dispose()
    app.emit(ServiceResult(ok=True, op="init", data={"path": str(app.settings.db_path)}))
