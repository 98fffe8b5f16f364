"""Tests for the top-level command group and shared CLI plumbing."""

from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from gwt.cli.cli import cli
from gwt.cli.ensure import Ensure
from gwt.cli.error_boundary import cli_error_boundary
from gwt.core.context import GwtContext
from gwt.core.errors import SubprocessError, TargetNotFoundError, UsageError
from gwt.core.git import PrintingGit
from gwt.core.git.fake import FakeGit


def test_help_lists_commands() -> None:
    result = CliRunner().invoke(cli, ["-h"], obj=GwtContext.for_test())

    assert result.exit_code == 0
    for command in ["init", "add", "list", "remove", "switch"]:
        assert command in result.output


def test_aliases_are_hidden_from_help() -> None:
    result = CliRunner().invoke(cli, ["--help"], obj=GwtContext.for_test())

    assert "  ls " not in result.output
    assert "  rm " not in result.output


@click.command()
@click.argument("kind")
@cli_error_boundary
def _raiser(kind: str) -> None:
    if kind == "usage":
        raise UsageError("Name is required", usage="gwt thing <name>")
    if kind == "missing":
        raise TargetNotFoundError("Worktree 'x' not found", ["main -> /proj/main"])
    if kind == "git":
        raise SubprocessError("Failed to list worktrees\nExit code: 128", returncode=128)
    raise RuntimeError("unexpected")


def test_error_boundary_usage_error() -> None:
    result = CliRunner().invoke(_raiser, ["usage"])

    assert result.exit_code == 1
    assert result.stderr.splitlines() == ["Error: Name is required", "Usage: gwt thing <name>"]


def test_error_boundary_target_not_found_lists_choices() -> None:
    result = CliRunner().invoke(_raiser, ["missing"])

    assert result.exit_code == 1
    assert "Available worktrees:\n  main -> /proj/main" in result.stderr


def test_error_boundary_subprocess_error() -> None:
    result = CliRunner().invoke(_raiser, ["git"])

    assert result.exit_code == 1
    assert result.stderr.startswith("Error: Failed to list worktrees")
    assert "Traceback" not in result.output


def test_error_boundary_lets_other_exceptions_through() -> None:
    result = CliRunner().invoke(_raiser, ["other"])

    assert isinstance(result.exception, RuntimeError)


def test_ensure_not_none_exits_with_styled_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        Ensure.not_none(None, "Not in a worktree")

    assert exc_info.value.code == 1
    assert "Error: Not in a worktree" in capsys.readouterr().err


def test_ensure_not_none_returns_value() -> None:
    assert Ensure.not_none("value", "unused") == "value"


def test_printing_git_echoes_mutations(capsys: pytest.CaptureFixture[str]) -> None:
    fake = FakeGit()
    git = PrintingGit(fake)

    git.delete_branch(Path("/proj/main"), "feat")
    git.has_local_branch(Path("/proj/main"), "feat")

    err = capsys.readouterr().err
    assert "$ git branch -D feat  (/proj/main)" in err
    assert "branch --list" not in err
    assert fake.deleted_branches == [(Path("/proj/main"), "feat")]


@click.command()
@click.argument("kind")
@cli_error_boundary
def _filesystem_raiser(kind: str) -> None:
    if kind == "rename":
        raise OSError(22, "Invalid argument", "/proj/feature")
    if kind == "missing":
        raise FileNotFoundError(2, "No such file or directory", "/proj/gone")
    raise ValueError("Invalid branch name")


@pytest.mark.parametrize(
    ("kind", "message"),
    [
        ("rename", "Error: [Errno 22] Invalid argument: '/proj/feature'"),
        ("missing", "Error: [Errno 2] No such file or directory: '/proj/gone'"),
        ("value", "Error: Invalid branch name"),
    ],
)
def test_error_boundary_reports_filesystem_and_value_errors(kind: str, message: str) -> None:
    result = CliRunner().invoke(_filesystem_raiser, [kind])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert result.stderr.strip() == message
