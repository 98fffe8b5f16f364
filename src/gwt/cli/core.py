"""Project discovery shared by the mutating commands."""

import logging
from dataclasses import dataclass
from pathlib import Path

from gwt.core.config_store import CONFIG_FILENAME, ProjectConfig, find_config, find_config_dir
from gwt.core.context import GwtContext
from gwt.core.errors import NotAProjectError, NoWorktreesFoundError
from gwt.core.worktree_registry import find_anchor_worktree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectLocation:
    """Where git commands run from and where new worktrees are placed.

    Attributes:
        working_dir: A git working tree belonging to the project
        root: Directory that holds one folder per worktree
    """

    working_dir: Path
    root: Path


def discover_project(ctx: GwtContext) -> ProjectLocation:
    """Locate the project around ctx.cwd.

    Inside a working tree, git's top-level is the working dir and the root is
    the nearest directory holding the config, or the top-level itself when no
    config exists. Outside a working tree, cwd must be the project root and
    an anchor worktree must exist below it.

    Raises:
        NotAProjectError: cwd is not inside a project
        NoWorktreesFoundError: project root has no worktree to run git from
    """
    toplevel = ctx.registry.current_worktree_path()
    if toplevel is not None:
        root = find_config_dir(toplevel)
        location = ProjectLocation(working_dir=toplevel, root=root if root is not None else toplevel)
        logger.debug("Inside working tree: %s", location)
        return location

    if not (ctx.cwd / CONFIG_FILENAME).is_file():
        raise NotAProjectError()

    anchor = find_anchor_worktree(ctx.cwd)
    if anchor is None:
        raise NoWorktreesFoundError()

    logger.debug("Project root %s anchored at %s", ctx.cwd, anchor)
    return ProjectLocation(working_dir=anchor, root=ctx.cwd)


def load_project_config(start: Path) -> ProjectConfig | None:
    """Config at or above start, or None. Invalid YAML raises ConfigError."""
    found = find_config(start)
    if found is None:
        return None
    return found[1]
