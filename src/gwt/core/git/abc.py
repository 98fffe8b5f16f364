"""High-level git operations interface.

This module provides a clean abstraction over git subprocess calls, making the
codebase more testable and maintainable.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- PrintingGit: Wrapper echoing mutating commands in verbose mode
- FakeGit: In-memory implementation for tests
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Worktree:
    """One entry of `git worktree list --porcelain`.

    branch is the fully-qualified ref (e.g. "refs/heads/feature/x") or "" when
    the worktree is on a detached HEAD. bare marks the administrative entry of
    a bare repository, which is never a checkout or deletion target.
    """

    path: Path
    head: str = ""
    branch: str = ""
    bare: bool = False


# ============================================================================
# Abstract Interface
# ============================================================================


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    Every method takes the directory git should run in explicitly; nothing
    depends on the process working directory.
    """

    @abstractmethod
    def list_worktrees(self, cwd: Path) -> list[Worktree]:
        """List all worktrees known to the repository containing cwd.

        Raises:
            SubprocessError: If cwd is not inside a git working tree
        """
        ...

    @abstractmethod
    def get_toplevel(self, cwd: Path) -> Path | None:
        """Top-level directory of the working tree containing cwd, or None."""
        ...

    @abstractmethod
    def clone(self, cwd: Path, url: str, target: str) -> None:
        """Clone url into cwd/target, streaming progress to the terminal."""
        ...

    @abstractmethod
    def get_current_branch(self, repo_path: Path) -> str:
        """Short name of the branch HEAD points to (symbolic-ref --short HEAD).

        Raises:
            SubprocessError: If HEAD is detached or repo_path is not a repository
        """
        ...

    @abstractmethod
    def get_remote_default_branch(self, cwd: Path) -> str | None:
        """Branch origin/HEAD points to (e.g. "main"), or None if unknown."""
        ...

    @abstractmethod
    def has_local_branch(self, cwd: Path, branch: str) -> bool:
        """Check `git branch --list <branch>`; failures count as absent."""
        ...

    @abstractmethod
    def has_remote_branch(self, cwd: Path, branch: str, remote: str = "origin") -> bool:
        """Check `git branch -r --list <remote>/<branch>`; failures count as absent."""
        ...

    @abstractmethod
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
        """Add a new git worktree, streaming git's output.

        Args:
            cwd: Directory to run git from (any worktree of the repository)
            path: Where the new worktree should be created
            branch: Branch to check out (or to create when create_branch is True)
            start_point: Ref the new branch starts from (ignored unless create_branch)
            create_branch: True to pass `-b <branch>`, False to attach an existing branch
            no_track: Pass `--no-track` so the new branch has no upstream
        """
        ...

    @abstractmethod
    def remove_worktree(self, cwd: Path, path: Path, *, force: bool) -> None:
        """Remove a worktree, streaming git's output.

        Args:
            cwd: Directory to run git from (must not be inside path)
            path: Worktree to remove
            force: True to remove even with uncommitted changes
        """
        ...

    @abstractmethod
    def delete_branch(self, cwd: Path, branch: str) -> None:
        """Force-delete a local branch (`git branch -D`)."""
        ...
