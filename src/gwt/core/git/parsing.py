"""Parsing for git's machine-readable worktree listing."""

from pathlib import Path

from gwt.core.git.abc import Worktree

_WORKTREE_PREFIX = "worktree "
_HEAD_PREFIX = "HEAD "
_BRANCH_PREFIX = "branch "


def parse_worktree_porcelain(output: str) -> list[Worktree]:
    """Parse `git worktree list --porcelain` output.

    Example input:
        worktree /projects/app/main
        HEAD 0123456789abcdef0123456789abcdef01234567
        branch refs/heads/main

        worktree /projects/app/feature/x
        HEAD fedcba9876543210fedcba9876543210fedcba98
        detached

    A `worktree ` line starts a new entry; the previous entry is finalized at
    that point or at end of input. Lines git may add in the future (locked,
    prunable, ...) are ignored, as are attribute lines before the first entry.

    Returns:
        Worktrees in the order git printed them
    """
    worktrees: list[Worktree] = []
    current: dict[str, str | bool] | None = None

    def _finalize() -> None:
        if current is None:
            return
        worktrees.append(
            Worktree(
                path=Path(str(current["path"])),
                head=str(current["head"]),
                branch=str(current["branch"]),
                bare=bool(current["bare"]),
            )
        )

    for raw_line in output.splitlines():
        line = raw_line.rstrip("\r")
        if line.startswith(_WORKTREE_PREFIX):
            _finalize()
            current = {
                "path": line[len(_WORKTREE_PREFIX) :],
                "head": "",
                "branch": "",
                "bare": False,
            }
        elif current is None:
            continue
        elif line.startswith(_HEAD_PREFIX):
            current["head"] = line[len(_HEAD_PREFIX) :]
        elif line.startswith(_BRANCH_PREFIX):
            current["branch"] = line[len(_BRANCH_PREFIX) :]
        elif line == "bare":
            current["bare"] = True

    _finalize()
    return worktrees
