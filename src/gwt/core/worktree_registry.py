"""Worktree discovery and lookup.

gwt projects are laid out as a project root holding the config file and one
directory per worktree:

    project/
      git-worktree-config.yaml
      main/            <- cloned by `gwt init`
      feature/login/   <- added by `gwt add feature/login`

When the user is inside any worktree, git itself answers "which worktrees
exist". From the project root (which is not a git working tree) the registry
finds an *anchor* worktree by scanning at most two directory levels for a
`.git` entry and asks git from there.

The pure helpers at the bottom work on Worktree lists only and are shared by
every command.
"""

import logging
from pathlib import Path

from gwt.core.config_store import CONFIG_FILENAME
from gwt.core.errors import NotAProjectError, NoWorktreesFoundError, SubprocessError
from gwt.core.git.abc import Git, Worktree

logger = logging.getLogger(__name__)

BRANCH_REF_PREFIX = "refs/heads/"
SHORT_HEAD_LENGTH = 7

# Branches that are never deleted on remove and are preferred as the place to
# run git from.
MAIN_BRANCH_NAMES: tuple[str, ...] = ("main", "master", "dev", "develop")

ANCHOR_SCAN_DEPTH = 2


class WorktreeRegistry:
    """Produces the current set of worktrees for the project around cwd."""

    def __init__(self, git: Git, cwd: Path) -> None:
        self._git = git
        self._cwd = cwd

    def list_all(self, *, require_anchor: bool = False) -> list[Worktree]:
        """Return every worktree of the project, in git's order.

        Args:
            require_anchor: When listing from a project root that has no
                worktree to anchor git commands, raise instead of returning [].
                Mutating commands set this; `list` does not.

        Raises:
            NotAProjectError: cwd is neither in a git working tree nor a project root
            NoWorktreesFoundError: require_anchor is set and no anchor exists
        """
        try:
            return self._git.list_worktrees(self._cwd)
        except SubprocessError as e:
            logger.debug("Worktree listing from %s failed: %s", self._cwd, e.stderr or e)

        if not (self._cwd / CONFIG_FILENAME).is_file():
            raise NotAProjectError()

        anchor = find_anchor_worktree(self._cwd)
        if anchor is None:
            logger.debug("No anchor worktree below %s", self._cwd)
            return _absent(require_anchor)

        logger.debug("Using anchor worktree %s", anchor)
        try:
            return self._git.list_worktrees(anchor)
        except SubprocessError as e:
            logger.debug("Worktree listing from anchor %s failed: %s", anchor, e.stderr or e)
            return _absent(require_anchor)

    def current_worktree_path(self) -> Path | None:
        """Top-level directory of the working tree containing cwd, if any."""
        return self._git.get_toplevel(self._cwd)


def _absent(require_anchor: bool) -> list[Worktree]:
    if require_anchor:
        raise NoWorktreesFoundError()
    return []


def _child_dirs(directory: Path) -> list[Path]:
    try:
        return sorted(entry for entry in directory.iterdir() if entry.is_dir())
    except OSError as e:
        logger.debug("Skipping unreadable directory %s: %s", directory, e)
        return []


def find_anchor_worktree(root: Path) -> Path | None:
    """Find a worktree directory below root to run git commands from.

    Checks root's immediate subdirectories first, then their subdirectories
    (nested branch folders such as `feature/x`). A directory qualifies when it
    contains a `.git` entry, which is a directory for the original clone and a
    file for linked worktrees. Directories are visited in name order.

    Returns:
        The first qualifying directory, or None
    """
    level = [root]
    for depth in range(1, ANCHOR_SCAN_DEPTH + 1):
        next_level: list[Path] = []
        for parent in level:
            for candidate in _child_dirs(parent):
                if (candidate / ".git").exists():
                    logger.debug("Anchor candidate at depth %d: %s", depth, candidate)
                    return candidate
                next_level.append(candidate)
        level = next_level
    return None


def clean_branch_name(branch: str) -> str:
    """Strip a leading `refs/heads/` from a branch ref.

    Only one prefix is removed, which makes the function idempotent for every
    branch git can actually produce.

    Examples:
        >>> clean_branch_name("refs/heads/feature/x")
        'feature/x'
        >>> clean_branch_name("feature/x")
        'feature/x'
    """
    if branch.startswith(BRANCH_REF_PREFIX):
        return branch[len(BRANCH_REF_PREFIX) :]
    return branch


def display_branch(worktree: Worktree) -> str:
    """Human-facing branch label: the short branch name, or the short HEAD when detached."""
    if worktree.branch:
        return clean_branch_name(worktree.branch)
    return worktree.head[:SHORT_HEAD_LENGTH]


def find_by_name_or_path(worktrees: list[Worktree], identifier: str) -> Worktree | None:
    """Resolve a user-supplied identifier to a worktree.

    Branch names win over directory names: first look for a worktree whose
    short branch equals identifier, then for one whose final path segment
    does. Within each pass the first worktree in listing order wins.
    """
    for wt in worktrees:
        if wt.branch and clean_branch_name(wt.branch) == identifier:
            return wt
    for wt in worktrees:
        if wt.path.name == identifier:
            return wt
    return None


def find_by_branch(worktrees: list[Worktree], branch: str) -> Worktree | None:
    """Find the worktree that has branch checked out (short name match only)."""
    for wt in worktrees:
        if wt.branch and clean_branch_name(wt.branch) == branch:
            return wt
    return None


def find_containing_worktree(worktrees: list[Worktree], path: Path) -> Worktree | None:
    """Find the most specific (deepest) worktree containing path."""
    best: Worktree | None = None
    for wt in worktrees:
        if path == wt.path or path.is_relative_to(wt.path):
            if best is None or len(wt.path.parts) > len(best.path.parts):
                best = wt
    return best


def is_main_branch(branch: str) -> bool:
    return clean_branch_name(branch) in MAIN_BRANCH_NAMES


def select_git_working_dir(worktrees: list[Worktree], target: Worktree) -> Worktree | None:
    """Choose the worktree to run git from when removing target.

    Prefers a non-bare worktree checked out on one of MAIN_BRANCH_NAMES,
    otherwise any other worktree. Never returns target itself.
    """
    others = [wt for wt in worktrees if wt.path != target.path]
    for wt in others:
        if not wt.bare and wt.branch and is_main_branch(wt.branch):
            return wt
    if others:
        return others[0]
    return None


def format_worktree_choices(worktrees: list[Worktree]) -> list[str]:
    """One `branch -> path` line per worktree, used in not-found errors."""
    return [f"{display_branch(wt)} -> {wt.path}" for wt in worktrees]
