"""Tests for the can-comment command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from boardgate.cli import cli


def _seed(runner: CliRunner, *commands: list[str]) -> None:
    for args in commands:
        result = runner.invoke(cli, args)
        assert result.exit_code == 0, result.output


@pytest.mark.usefixtures("_isolated_project")
class TestCanComment:
    def test_denial_exits_zero(self, cli_runner: CliRunner) -> None:
        _seed(cli_runner, ["board", "add", "b1"])
        result = cli_runner.invoke(cli, ["can-comment", "b1", "alice"])
        assert result.exit_code == 0
        assert "denied: You must be a member of this board to comment" in result.output

    def test_allowed(self, cli_runner: CliRunner) -> None:
        _seed(cli_runner, ["board", "add", "b1"], ["member", "add", "alice", "--board", "b1"])
        result = cli_runner.invoke(cli, ["can-comment", "b1", "alice"])
        assert result.exit_code == 0
        assert "allowed" in result.output

    def test_quiet(self, cli_runner: CliRunner) -> None:
        _seed(cli_runner, ["board", "add", "b1", "--policy", "disabled"])
        result = cli_runner.invoke(cli, ["-q", "can-comment", "b1", "alice"])
        assert result.output.strip() == "denied"

    def test_json_workspace_chain(self, cli_runner: CliRunner) -> None:
        _seed(
            cli_runner,
            ["workspace", "add", "w1"],
            ["board", "add", "b1", "--policy", "workspace", "--workspace", "w1"],
            ["member", "add", "bob", "--workspace", "w1"],
        )
        result = cli_runner.invoke(cli, ["--json", "can-comment", "b1", "bob"])
        payload = json.loads(result.output)
        assert payload["ok"] is True
        assert payload["op"] == "check_comment_permission"
        assert payload["data"] == {
            "board_id": "b1",
            "user_id": "bob",
            "allowed": True,
            "reason": None,
        }

    def test_missing_board(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "can-comment", "nope", "alice"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["reason"] == "Board not found"

    def test_verbose_shows_lookup_spans(self, cli_runner: CliRunner) -> None:
        _seed(cli_runner, ["board", "add", "b1", "--policy", "anyone"])
        result = cli_runner.invoke(cli, ["-v", "can-comment", "b1", "alice"])
        assert result.exit_code == 0
        assert "find_board" in result.output
        assert "find_board_membership" not in result.output
