"""Tests for the --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from boardgate.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["init", "--examples"], ["boardgate init"]),
    (["board", "--examples"], ["--policy workspace"]),
    (["workspace", "--examples"], ["boardgate workspace add"]),
    (["member", "--examples"], ["--board b1", "--workspace w1"]),
    (["can-comment", "--examples"], ["boardgate -q can-comment"]),
    (["validate", "--examples"], ["boardgate validate create-comment"]),
]


@pytest.mark.usefixtures("_isolated_project")
@pytest.mark.parametrize(("args", "keywords"), EXAMPLES_COMMANDS)
def test_examples_flag(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output


@pytest.mark.usefixtures("_isolated_project")
def test_examples_not_in_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["can-comment", "--help"])
    assert "--examples" in result.output
    assert "boardgate -q can-comment" not in result.output
