"""Command: run a registered request schema against JSON input."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from boardgate.commands._base import BoardgateCommand
from boardgate.schemas import REQUEST_SCHEMAS

if TYPE_CHECKING:
    from boardgate.commands._context import AppContext


def _json_object(
    _ctx: click.Context, param: click.Parameter, value: str | None
) -> dict[str, Any] | None:
    if value is None:
        return None
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"not valid JSON: {exc.msg}", param=param) from exc
    if not isinstance(parsed, dict):
        raise click.BadParameter("must be a JSON object", param=param)
    return parsed


@click.command(
    cls=BoardgateCommand,
    examples="""\
  boardgate validate create-comment --body '{"cardId": "…", "content": "hi"}'
  boardgate --json validate create-list --params '{"boardId": "…"}' --body '{"title": ""}'""",
)
@click.argument("schema_name", type=click.Choice(sorted(REQUEST_SCHEMAS)))
@click.option("--body", default=None, callback=_json_object, help="Request body (JSON).")
@click.option("--query", default=None, callback=_json_object, help="Query string (JSON).")
@click.option("--params", default=None, callback=_json_object, help="Path params (JSON).")
@click.pass_obj
def validate(
    app: AppContext,
    schema_name: str,
    body: dict[str, Any] | None,
    query: dict[str, Any] | None,
    params: dict[str, Any] | None,
) -> None:
    """Validate a request against SCHEMA_NAME and show the normalized result."""
    from boardgate.services.validation import assemble_input
    from boardgate.services.validation import validate as run_validation

    result = run_validation(
        REQUEST_SCHEMAS[schema_name],
        assemble_input(body, query, params),
        log_violations=app.settings.validation.log_violations,
    )
    app.emit(result)
