"""AppContext: shared Click context for all commands.

Created once by the root group and handed to subcommands via
``@click.pass_obj``. The repository is opened lazily so ``--help`` and
``--version`` never touch the database.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from boardgate.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from boardgate.config.settings import BoardgateSettings
    from boardgate.infrastructure.repositories.boards import BoardRepository
    from boardgate.services.result import ServiceResult


class AppContext:
    """Settings, lazily opened storage and result emission."""

    def __init__(self, settings: BoardgateSettings) -> None:
        self.settings = settings
        self._engine: Engine | None = None

        from boardgate.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from boardgate.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def engine(self) -> Engine:
        """Engine on the configured database, created (with tables) on first use."""
        if self._engine is None:
            from boardgate.infrastructure.database.engine import init_database

            self._engine = init_database(self.settings.db_path)
        return self._engine

    @property
    def repository(self) -> BoardRepository:
        from boardgate.infrastructure.repositories.boards import BoardRepository

        return BoardRepository(self.engine)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * ``result.ok``: stdout, normal return. Warnings go to stderr
          outside JSON mode.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
