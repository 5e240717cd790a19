"""Subcommand modules for boardgate.

``register_commands()`` uses deferred imports to keep ``boardgate --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root group."""
    # --- Groups ---
    from boardgate.commands.board import board
    from boardgate.commands.member import member
    from boardgate.commands.workspace import workspace

    cli.add_command(board)
    cli.add_command(workspace)
    cli.add_command(member)

    # --- Standalone commands ---
    from boardgate.commands.can_comment import can_comment
    from boardgate.commands.init_cmd import init
    from boardgate.commands.validate import validate

    cli.add_command(init)
    cli.add_command(can_comment)
    cli.add_command(validate)
