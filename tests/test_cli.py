"""Tests for the root boardgate CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from boardgate import __version__
from boardgate.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "boardgate" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_project")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


@pytest.mark.usefixtures("_isolated_project")
def test_commands_registered(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    for name in ("init", "board", "workspace", "member", "can-comment", "validate"):
        assert name in result.output


@pytest.mark.usefixtures("_isolated_project")
def test_help_does_not_create_database(cli_runner: CliRunner, tmp_path: Path) -> None:
    cli_runner.invoke(cli, ["can-comment", "--help"])
    assert not (tmp_path / ".boardgate").exists()
