"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`;
unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from boardgate.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from boardgate.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a string (plain text when not on a terminal)."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    if verbose:
        _render_meta(console, result)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    if result.op == "check_comment_permission":
        return "allowed" if result.data.get("allowed") else "denied"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="bg.ok"), Text(f"  {result.op}", style="bg.op"), sep="")


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="bg.key")
    style = "bg.id" if key == "id" or key.endswith("_id") else ""
    console.print(k, Text(str(value), style=style), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_span(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    duration = span.get("duration_ms", 0.0)
    console.print(f"{' ' * indent}{duration:>8.2f}ms  {span.get('name', '?')}")
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_verdict(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    if data.get("allowed"):
        console.print(Text("  allowed", style="bg.allowed"))
    else:
        console.print(Text("  denied", style="bg.denied"), Text(f": {data.get('reason')}"), sep="")
    if verbose:
        _field(console, "board_id", data.get("board_id"))
        _field(console, "user_id", data.get("user_id"))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="bg.error"),
        Text(f"  {result.op}", style="bg.op"),
        Text(f": {msg}"),
        sep="",
    )

    if err is None:
        return
    for violation in err.detail.get("violations", []):
        path = ".".join(str(p) for p in violation["path"])
        line = Text(f"  - {path}", style="bg.path")
        console.print(line, Text(f": {violation['message']}"), sep="")
    if verbose:
        for k, v in err.detail.items():
            if k != "violations":
                console.print(f"    {k}: {v}")


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "check_comment_permission": _render_verdict,
}
