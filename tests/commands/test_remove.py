"""Tests for the remove command."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from gwt.cli.cli import cli
from gwt.core.context import GwtContext
from gwt.core.git.abc import Worktree
from gwt.core.git.fake import FakeGit
from tests.fakes.shell import FakeShell
from tests.fakes.user_input import FakeUserInput
from tests.test_utils.project import make_worktree_dir, write_config

MAIN = Worktree(path=Path("/proj/main"), head="a" * 40, branch="refs/heads/main")
SCRATCH = Worktree(path=Path("/proj/scratch"), head="b" * 40, branch="refs/heads/scratch")
DEVELOP = Worktree(path=Path("/proj/develop"), head="c" * 40, branch="refs/heads/develop")


def test_remove_runs_git_from_main_and_deletes_branch() -> None:
    git = FakeGit(worktrees={MAIN.path: [MAIN, SCRATCH]})
    user_input = FakeUserInput(answers=["y"])
    ctx = GwtContext.for_test(git=git, user_input=user_input, cwd=MAIN.path)

    result = CliRunner().invoke(cli, ["remove", "scratch"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert git.removed_worktrees == [(MAIN.path, SCRATCH.path, True)]
    assert git.deleted_branches == [(MAIN.path, "scratch")]
    assert user_input.prompts == ["Are you sure you want to remove this worktree? (y/N)"]


def test_remove_bare_entry_is_protected() -> None:
    bare = Worktree(path=Path("/proj/main"), bare=True)
    git = FakeGit(worktrees={SCRATCH.path: [bare, SCRATCH]})
    user_input = FakeUserInput(answers=["y"])
    ctx = GwtContext.for_test(git=git, user_input=user_input, cwd=SCRATCH.path)

    result = CliRunner().invoke(cli, ["remove", "main"], obj=ctx)

    assert result.exit_code == 1
    assert "Cannot remove the main (bare) repository" in result.output
    assert user_input.prompts == []
    assert git.removed_worktrees == []
    assert git.deleted_branches == []


@pytest.mark.parametrize("answer", ["n", "", "no", "yep", " maybe "])
def test_remove_declined_changes_nothing(answer: str) -> None:
    git = FakeGit(worktrees={MAIN.path: [MAIN, SCRATCH]})
    ctx = GwtContext.for_test(git=git, user_input=FakeUserInput(answers=[answer]), cwd=MAIN.path)

    result = CliRunner().invoke(cli, ["remove", "scratch"], obj=ctx)

    assert result.exit_code == 0
    assert "Removal cancelled." in result.output
    assert git.removed_worktrees == []
    assert git.deleted_branches == []


@pytest.mark.parametrize("answer", ["Y", "yes", "  YES  "])
def test_remove_accepts_affirmative_answers(answer: str) -> None:
    git = FakeGit(worktrees={MAIN.path: [MAIN, SCRATCH]})
    ctx = GwtContext.for_test(git=git, user_input=FakeUserInput(answers=[answer]), cwd=MAIN.path)

    result = CliRunner().invoke(cli, ["remove", "scratch"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert len(git.removed_worktrees) == 1


def test_remove_yes_flag_skips_prompt() -> None:
    git = FakeGit(worktrees={MAIN.path: [MAIN, SCRATCH]})
    user_input = FakeUserInput()
    ctx = GwtContext.for_test(git=git, user_input=user_input, cwd=MAIN.path)

    result = CliRunner().invoke(cli, ["rm", "-y", "scratch"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert user_input.prompts == []
    assert git.removed_worktrees == [(MAIN.path, SCRATCH.path, True)]


def test_remove_keeps_main_branches() -> None:
    git = FakeGit(worktrees={MAIN.path: [MAIN, DEVELOP]})
    ctx = GwtContext.for_test(git=git, cwd=MAIN.path)

    result = CliRunner().invoke(cli, ["remove", "--yes", "develop"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert git.removed_worktrees == [(MAIN.path, DEVELOP.path, True)]
    assert git.deleted_branches == []


def test_remove_detached_worktree_deletes_no_branch() -> None:
    detached = Worktree(path=Path("/proj/experiment"), head="d" * 40)
    git = FakeGit(worktrees={MAIN.path: [MAIN, detached]})
    ctx = GwtContext.for_test(git=git, cwd=MAIN.path)

    result = CliRunner().invoke(cli, ["remove", "--yes", "experiment"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert git.deleted_branches == []


def test_remove_branch_delete_failure_is_only_a_warning() -> None:
    git = FakeGit(worktrees={MAIN.path: [MAIN, SCRATCH]}, delete_branch_fails=True)
    ctx = GwtContext.for_test(git=git, cwd=MAIN.path)

    result = CliRunner().invoke(cli, ["remove", "--yes", "scratch"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Could not delete branch scratch" in result.output
    assert git.removed_worktrees == [(MAIN.path, SCRATCH.path, True)]


def test_remove_worktree_failure_is_fatal() -> None:
    git = FakeGit(worktrees={MAIN.path: [MAIN, SCRATCH]}, remove_worktree_fails=True)
    ctx = GwtContext.for_test(git=git, cwd=MAIN.path)

    result = CliRunner().invoke(cli, ["remove", "--yes", "scratch"], obj=ctx)

    assert result.exit_code == 1
    assert "Failed to remove worktree" in result.output
    assert git.deleted_branches == []


def test_remove_unknown_identifier_lists_choices() -> None:
    git = FakeGit(worktrees={MAIN.path: [MAIN, SCRATCH]})
    ctx = GwtContext.for_test(git=git, cwd=MAIN.path)

    result = CliRunner().invoke(cli, ["remove", "nope"], obj=ctx)

    assert result.exit_code == 1
    assert "Worktree 'nope' not found" in result.output
    assert "Available worktrees:" in result.output
    assert "  main -> /proj/main" in result.output
    assert "  scratch -> /proj/scratch" in result.output


def test_remove_without_identifier_outside_worktree_fails() -> None:
    git = FakeGit(worktrees={MAIN.path: [MAIN, SCRATCH]})
    ctx = GwtContext.for_test(git=git, cwd=MAIN.path)

    result = CliRunner().invoke(cli, ["remove"], obj=ctx)

    assert result.exit_code == 1
    assert "Not inside a worktree" in result.output
    assert git.removed_worktrees == []


def test_remove_current_worktree_moves_to_project_root(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    write_config(tmp_path, extra="hooks:\n  postRemove:\n    - echo ${branchName}\n")
    main_dir = make_worktree_dir(tmp_path, "main")
    feat_dir = make_worktree_dir(tmp_path, "feat")
    main = Worktree(path=main_dir, branch="refs/heads/main")
    feat = Worktree(path=feat_dir, branch="refs/heads/feat")
    cwd = feat_dir / "src"
    cwd.mkdir()
    monkeypatch.chdir(cwd)

    git = FakeGit(worktrees={main_dir: [main, feat]}, toplevels={cwd: feat_dir})
    shell = FakeShell()
    ctx = GwtContext.for_test(git=git, shell=shell, cwd=cwd)

    result = CliRunner().invoke(cli, ["remove", "--yes"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "You are about to remove the worktree you are currently in" in result.output
    assert git.removed_worktrees == [(main_dir, feat_dir, True)]
    assert git.deleted_branches == [(main_dir, "feat")]
    assert shell.command_calls == [("echo feat", tmp_path)]
    assert result.stdout.strip() == str(tmp_path)
    assert Path.cwd() == tmp_path


def test_remove_from_project_root_without_worktrees_fails(tmp_path: Path) -> None:
    write_config(tmp_path)
    ctx = GwtContext.for_test(git=FakeGit(), cwd=tmp_path)

    result = CliRunner().invoke(cli, ["remove", "feat"], obj=ctx)

    assert result.exit_code == 1
    assert "No existing worktrees found in project root" in result.output
