"""Rich Console factory and theme for boardgate output.

Consoles render into a StringIO buffer so renderers keep a
``-> str`` contract. In non-TTY environments (tests, pipes) Rich
disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BOARDGATE_THEME = Theme(
    {
        "bg.ok": "bold green",
        "bg.error": "bold red",
        "bg.op": "bold cyan",
        "bg.key": "dim",
        "bg.id": "bold blue",
        "bg.allowed": "bold green",
        "bg.denied": "bold yellow",
        "bg.path": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=BOARDGATE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
