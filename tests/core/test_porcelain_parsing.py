"""Tests for parsing `git worktree list --porcelain` output."""

from pathlib import Path

from gwt.core.git import Worktree, parse_worktree_porcelain


def test_parses_entries_in_git_order() -> None:
    output = (
        "worktree /proj/main\n"
        "HEAD 1111111111111111111111111111111111111111\n"
        "branch refs/heads/main\n"
        "\n"
        "worktree /proj/feature/x\n"
        "HEAD 2222222222222222222222222222222222222222\n"
        "branch refs/heads/feature/x\n"
    )

    worktrees = parse_worktree_porcelain(output)

    assert worktrees == [
        Worktree(
            path=Path("/proj/main"),
            head="1111111111111111111111111111111111111111",
            branch="refs/heads/main",
        ),
        Worktree(
            path=Path("/proj/feature/x"),
            head="2222222222222222222222222222222222222222",
            branch="refs/heads/feature/x",
        ),
    ]


def test_bare_and_detached_entries() -> None:
    output = (
        "worktree /proj/.bare\n"
        "bare\n"
        "\n"
        "worktree /proj/scratch\n"
        "HEAD abcdef0123456789abcdef0123456789abcdef01\n"
        "detached\n"
    )

    bare, detached = parse_worktree_porcelain(output)

    assert bare.bare is True
    assert bare.branch == ""
    assert detached.bare is False
    assert detached.branch == ""
    assert detached.head.startswith("abcdef0")


def test_last_entry_without_trailing_blank_line_is_kept() -> None:
    worktrees = parse_worktree_porcelain("worktree /proj/main\nHEAD abc\nbranch refs/heads/main")

    assert len(worktrees) == 1
    assert worktrees[0].branch == "refs/heads/main"


def test_unknown_lines_and_leading_attributes_are_ignored() -> None:
    output = (
        "HEAD ffffffffffffffffffffffffffffffffffffffff\n"
        "worktree /proj/main\n"
        "HEAD 1111111111111111111111111111111111111111\n"
        "branch refs/heads/main\n"
        "locked reason here\n"
        "prunable gitdir file points to non-existent location\n"
    )

    worktrees = parse_worktree_porcelain(output)

    assert worktrees == [
        Worktree(
            path=Path("/proj/main"),
            head="1111111111111111111111111111111111111111",
            branch="refs/heads/main",
        )
    ]


def test_windows_line_endings() -> None:
    worktrees = parse_worktree_porcelain("worktree /proj/main\r\nbranch refs/heads/main\r\n")

    assert worktrees[0].path == Path("/proj/main")
    assert worktrees[0].branch == "refs/heads/main"


def test_empty_output() -> None:
    assert parse_worktree_porcelain("") == []
