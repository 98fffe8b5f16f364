"""Printing Git wrapper for verbose output.

This module provides a Git wrapper that prints the git command line for each
mutating operation before delegating to the wrapped implementation.
"""

from pathlib import Path

import click

from gwt.core.git.abc import Git, Worktree
from gwt.core.output import user_output

# ============================================================================
# Printing Wrapper Implementation
# ============================================================================


class PrintingGit(Git):
    """Wrapper that prints operations before delegating to inner implementation.

    Usage:
        git = PrintingGit(RealGit()) if verbose else RealGit()
    """

    def __init__(self, wrapped: Git) -> None:
        self._wrapped = wrapped

    def _emit(self, command: str, cwd: Path) -> None:
        user_output(click.style(f"$ {command}  ({cwd})", dim=True))

    # Read-only operations: delegate without printing

    def list_worktrees(self, cwd: Path) -> list[Worktree]:
        return self._wrapped.list_worktrees(cwd)

    def get_toplevel(self, cwd: Path) -> Path | None:
        return self._wrapped.get_toplevel(cwd)

    def get_current_branch(self, repo_path: Path) -> str:
        return self._wrapped.get_current_branch(repo_path)

    def get_remote_default_branch(self, cwd: Path) -> str | None:
        return self._wrapped.get_remote_default_branch(cwd)

    def has_local_branch(self, cwd: Path, branch: str) -> bool:
        return self._wrapped.has_local_branch(cwd, branch)

    def has_remote_branch(self, cwd: Path, branch: str, remote: str = "origin") -> bool:
        return self._wrapped.has_remote_branch(cwd, branch, remote)

    # Operations that need printing

    def clone(self, cwd: Path, url: str, target: str) -> None:
        self._emit(f"git clone {url} {target}", cwd)
        self._wrapped.clone(cwd, url, target)

    def add_worktree(
        self,
        cwd: Path,
        path: Path,
        *,
        branch: str,
        start_point: str | None,
        create_branch: bool,
        no_track: bool = False,
    ) -> None:
        parts = ["git worktree add"]
        if no_track:
            parts.append("--no-track")
        if create_branch:
            parts.extend(["-b", branch, str(path)])
            if start_point is not None:
                parts.append(start_point)
        else:
            parts.extend([str(path), branch])
        self._emit(" ".join(parts), cwd)
        self._wrapped.add_worktree(
            cwd,
            path,
            branch=branch,
            start_point=start_point,
            create_branch=create_branch,
            no_track=no_track,
        )

    def remove_worktree(self, cwd: Path, path: Path, *, force: bool) -> None:
        force_flag = " --force" if force else ""
        self._emit(f"git worktree remove{force_flag} {path}", cwd)
        self._wrapped.remove_worktree(cwd, path, force=force)

    def delete_branch(self, cwd: Path, branch: str) -> None:
        self._emit(f"git branch -D {branch}", cwd)
        self._wrapped.delete_branch(cwd, branch)
