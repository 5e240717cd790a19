"""Tests for the validate command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from boardgate.cli import cli

CARD_ID = "6f1c2a9e-8a4b-4d1f-9f0e-2c3b4a5d6e7f"


@pytest.mark.usefixtures("_isolated_project")
class TestValidate:
    def test_accepts_and_normalizes(self, cli_runner: CliRunner) -> None:
        body = json.dumps({"content": "  hi  ", "cardId": CARD_ID})
        result = cli_runner.invoke(cli, ["--json", "validate", "create-comment", "--body", body])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert data["body"] == {"content": "hi", "card_id": CARD_ID}

    def test_rejects_with_every_violation(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "update-comment"])
        assert result.exit_code == 1
        assert (
            "Invalid input: params.id: Field required, body.content: Field required"
            in result.output
        )
        assert "  - params.id: Field required" in result.output

    def test_json_failure_carries_status(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "validate", "create-list", "--body", '{"title": "x"}']
        )
        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["error"]["code"] == "INVALID_INPUT"
        assert payload["error"]["detail"]["status_code"] == 400

    def test_bad_json_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "login", "--body", "{nope"])
        assert result.exit_code == 2
        assert "not valid JSON" in result.output

    def test_non_object_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "login", "--body", "[1, 2]"])
        assert result.exit_code == 2
        assert "must be a JSON object" in result.output

    def test_unknown_schema(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "delete-board"])
        assert result.exit_code == 2
