"""Production Git implementation using subprocess.

This module provides the real Git implementation that executes actual git
commands via subprocess.
"""

import subprocess
from pathlib import Path

from gwt.core.git.abc import Git, Worktree
from gwt.core.git.parsing import parse_worktree_porcelain
from gwt.core.subprocess import run_streaming, run_subprocess_with_context

_REMOTE_HEAD_PREFIX = "refs/remotes/origin/"

# ============================================================================
# Production Implementation
# ============================================================================


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def list_worktrees(self, cwd: Path) -> list[Worktree]:
        """List all worktrees in the repository."""
        result = run_subprocess_with_context(
            ["git", "worktree", "list", "--porcelain"],
            operation_context="list worktrees",
            cwd=cwd,
        )
        return parse_worktree_porcelain(result.stdout)

    def get_toplevel(self, cwd: Path) -> Path | None:
        """Get the top-level directory of the current working tree."""
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None
        toplevel = result.stdout.strip()
        if not toplevel:
            return None
        return Path(toplevel)

    def clone(self, cwd: Path, url: str, target: str) -> None:
        """Clone a repository with streaming output."""
        run_streaming(
            ["git", "clone", url, target],
            operation_context=f"clone {url}",
            cwd=cwd,
        )

    def get_current_branch(self, repo_path: Path) -> str:
        """Get the branch HEAD points to."""
        result = run_subprocess_with_context(
            ["git", "symbolic-ref", "--short", "HEAD"],
            operation_context="determine current branch",
            cwd=repo_path,
        )
        return result.stdout.strip()

    def get_remote_default_branch(self, cwd: Path) -> str | None:
        """Get the branch origin/HEAD points to."""
        result = subprocess.run(
            ["git", "symbolic-ref", "refs/remotes/origin/HEAD"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None
        # Parse "refs/remotes/origin/master" -> "master"
        ref = result.stdout.strip()
        if not ref.startswith(_REMOTE_HEAD_PREFIX):
            return None
        return ref[len(_REMOTE_HEAD_PREFIX) :] or None

    def has_local_branch(self, cwd: Path, branch: str) -> bool:
        """Check whether a local branch exists."""
        result = subprocess.run(
            ["git", "branch", "--list", branch],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return False
        return bool(result.stdout.strip())

    def has_remote_branch(self, cwd: Path, branch: str, remote: str = "origin") -> bool:
        """Check whether a remote-tracking branch exists."""
        result = subprocess.run(
            ["git", "branch", "-r", "--list", f"{remote}/{branch}"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return False
        return bool(result.stdout.strip())

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
        """Add a new git worktree."""
        cmd = ["git", "worktree", "add"]
        if no_track:
            cmd.append("--no-track")
        if create_branch:
            cmd.extend(["-b", branch, str(path)])
            if start_point is not None:
                cmd.append(start_point)
            context = f"add worktree with new branch '{branch}' at {path}"
        else:
            cmd.extend([str(path), branch])
            context = f"add worktree for branch '{branch}' at {path}"

        run_streaming(cmd, operation_context=context, cwd=cwd)

    def remove_worktree(self, cwd: Path, path: Path, *, force: bool) -> None:
        """Remove a worktree."""
        cmd = ["git", "worktree", "remove"]
        if force:
            cmd.append("--force")
        cmd.append(str(path))
        run_streaming(cmd, operation_context=f"remove worktree at {path}", cwd=cwd)

    def delete_branch(self, cwd: Path, branch: str) -> None:
        """Force-delete a local branch."""
        run_subprocess_with_context(
            ["git", "branch", "-D", branch],
            operation_context=f"delete branch '{branch}'",
            cwd=cwd,
        )
