"""Fake Git implementation for testing.

FakeGit is an in-memory implementation that accepts pre-configured state in its
constructor and records mutating calls for assertions. Only clone() touches the
filesystem (it creates the target directory and any `clone_files`) so that
init's rename step can run against a temporary directory.
"""

from pathlib import Path

from gwt.core.errors import SubprocessError
from gwt.core.git.abc import Git, Worktree


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    State Management:
    - All state is provided via constructor parameters
    - Mutating operations record their arguments in *_calls lists
    - remove_worktree() also drops the entry from the in-memory listing

    Listing semantics: list_worktrees(cwd) succeeds when cwd is a key of
    `worktrees` or lies inside any worktree of a configured listing, mirroring
    git answering from any worktree of the repository.
    """

    def __init__(
        self,
        *,
        worktrees: dict[Path, list[Worktree]] | None = None,
        toplevels: dict[Path, Path] | None = None,
        current_branches: dict[Path, str] | None = None,
        clone_branch: str = "main",
        clone_files: dict[str, str] | None = None,
        remote_default_branches: dict[Path, str] | None = None,
        local_branches: dict[Path, list[str]] | None = None,
        remote_branches: dict[Path, list[str]] | None = None,
        clone_fails: bool = False,
        add_worktree_fails: bool = False,
        remove_worktree_fails: bool = False,
        delete_branch_fails: bool = False,
    ) -> None:
        self._worktrees = {key: list(value) for key, value in (worktrees or {}).items()}
        self._toplevels = toplevels or {}
        self._current_branches = dict(current_branches or {})
        self._clone_branch = clone_branch
        self._clone_files = clone_files or {}
        self._remote_default_branches = remote_default_branches or {}
        self._local_branches = local_branches or {}
        self._remote_branches = remote_branches or {}
        self._clone_fails = clone_fails
        self._add_worktree_fails = add_worktree_fails
        self._remove_worktree_fails = remove_worktree_fails
        self._delete_branch_fails = delete_branch_fails

        self._list_calls: list[Path] = []
        self._cloned: list[tuple[Path, str, str]] = []
        self._added_worktrees: list[tuple[Path, Path, str, str | None, bool, bool]] = []
        self._removed_worktrees: list[tuple[Path, Path, bool]] = []
        self._deleted_branches: list[tuple[Path, str]] = []

    def _listing_key(self, cwd: Path) -> Path | None:
        if cwd in self._worktrees:
            return cwd
        for key, listing in self._worktrees.items():
            for wt in listing:
                if cwd == wt.path or cwd.is_relative_to(wt.path):
                    return key
        return None

    def list_worktrees(self, cwd: Path) -> list[Worktree]:
        self._list_calls.append(cwd)
        key = self._listing_key(cwd)
        if key is None:
            raise SubprocessError(
                "Failed to list worktrees\nstderr: fatal: not a git repository",
                returncode=128,
                stderr="fatal: not a git repository",
            )
        return list(self._worktrees[key])

    def get_toplevel(self, cwd: Path) -> Path | None:
        return self._toplevels.get(cwd)

    def clone(self, cwd: Path, url: str, target: str) -> None:
        if self._clone_fails:
            raise SubprocessError(f"Failed to clone {url}\nExit code: 128", returncode=128)
        self._cloned.append((cwd, url, target))
        clone_dir = cwd / target
        clone_dir.mkdir(parents=True)
        for relative, content in self._clone_files.items():
            file_path = clone_dir / relative
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding="utf-8")

    def get_current_branch(self, repo_path: Path) -> str:
        if repo_path in self._current_branches:
            return self._current_branches[repo_path]
        for cwd, _url, target in self._cloned:
            if repo_path in (cwd / target, Path(target)):
                return self._clone_branch
        raise SubprocessError(
            "Failed to determine current branch", returncode=128, stderr="fatal: not a git repository"
        )

    def get_remote_default_branch(self, cwd: Path) -> str | None:
        return self._remote_default_branches.get(cwd)

    def has_local_branch(self, cwd: Path, branch: str) -> bool:
        return branch in self._local_branches.get(cwd, [])

    def has_remote_branch(self, cwd: Path, branch: str, remote: str = "origin") -> bool:
        return f"{remote}/{branch}" in self._remote_branches.get(cwd, [])

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
        if self._add_worktree_fails:
            raise SubprocessError(
                f"Failed to add worktree for branch '{branch}' at {path}\nExit code: 128",
                returncode=128,
            )
        self._added_worktrees.append((cwd, path, branch, start_point, create_branch, no_track))

    def remove_worktree(self, cwd: Path, path: Path, *, force: bool) -> None:
        if self._remove_worktree_fails:
            raise SubprocessError(f"Failed to remove worktree at {path}\nExit code: 128", 128)
        self._removed_worktrees.append((cwd, path, force))
        for key, listing in self._worktrees.items():
            self._worktrees[key] = [wt for wt in listing if wt.path != path]

    def delete_branch(self, cwd: Path, branch: str) -> None:
        if self._delete_branch_fails:
            raise SubprocessError(
                f"Failed to delete branch '{branch}'\nstderr: error: branch '{branch}' not found",
                returncode=1,
                stderr=f"error: branch '{branch}' not found",
            )
        self._deleted_branches.append((cwd, branch))

    @property
    def list_calls(self) -> list[Path]:
        """Directories list_worktrees() was called from, in order.

        This property is for test assertions only.
        """
        return self._list_calls.copy()

    @property
    def cloned(self) -> list[tuple[Path, str, str]]:
        """Get the list of (cwd, url, target) clone() calls.

        This property is for test assertions only.
        """
        return self._cloned.copy()

    @property
    def added_worktrees(self) -> list[tuple[Path, Path, str, str | None, bool, bool]]:
        """Get (cwd, path, branch, start_point, create_branch, no_track) tuples.

        This property is for test assertions only.
        """
        return self._added_worktrees.copy()

    @property
    def removed_worktrees(self) -> list[tuple[Path, Path, bool]]:
        """Get (cwd, path, force) tuples of remove_worktree() calls.

        This property is for test assertions only.
        """
        return self._removed_worktrees.copy()

    @property
    def deleted_branches(self) -> list[tuple[Path, str]]:
        """Get (cwd, branch) tuples of delete_branch() calls.

        This property is for test assertions only.
        """
        return self._deleted_branches.copy()
