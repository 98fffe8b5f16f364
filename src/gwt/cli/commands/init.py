"""Init command - clone a repository as the first worktree of a new project."""

import logging
import shutil
from pathlib import Path

import click

from gwt.cli.error_boundary import cli_error_boundary
from gwt.core.config_store import CONFIG_FILENAME, ProjectConfig, ProjectHooks, save_config
from gwt.core.context import GwtContext
from gwt.core.errors import UsageError
from gwt.core.hooks import HookContext
from gwt.core.output import user_output

logger = logging.getLogger(__name__)

INIT_USAGE = "gwt init <repository-url>"


def repository_name_from_url(url: str) -> str:
    """Derive the clone directory name from a repository URL.

    Examples:
        >>> repository_name_from_url("https://github.com/acme/app.git")
        'app'
        >>> repository_name_from_url("git@github.com:app.git")
        'app'
    """
    name = url.rstrip("/").rsplit("/", 1)[-1]
    if "/" not in url and ":" in name:
        name = name.rsplit(":", 1)[-1]
    if name.endswith(".git"):
        name = name[: -len(".git")]
    return name


def is_plain_directory_name(name: str) -> bool:
    """True when name is a single directory entry, so root / name stays directly inside root."""
    if name in ("", ".", ".."):
        return False
    return "/" not in name and "\\" not in name


def _remove_existing(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        user_output(click.style(f"Removing existing directory: {path}", fg="yellow"))
        shutil.rmtree(path)
    elif path.exists() or path.is_symlink():
        path.unlink()


def _move_clone(clone_dir: Path, worktree_dir: Path) -> None:
    """Rename the fresh clone to its branch directory.

    A branch such as `app/v2` for a clone named `app` puts the destination
    inside the clone, so the clone is first parked under a temporary
    sibling name.
    """
    source = clone_dir
    if worktree_dir.is_relative_to(clone_dir):
        source = clone_dir.with_name(f".{clone_dir.name}.gwt-init")
        _remove_existing(source)
        logger.debug("Parking clone at %s before moving it to %s", source, worktree_dir)
        clone_dir.rename(source)

    _remove_existing(worktree_dir)
    worktree_dir.parent.mkdir(parents=True, exist_ok=True)
    source.rename(worktree_dir)


@click.command("init")
@click.argument("repository_url", required=False, default="")
@click.pass_obj
@cli_error_boundary
def init_cmd(ctx: GwtContext, repository_url: str) -> None:
    """Clone REPOSITORY_URL and set up a worktree project in the current directory.

    The clone ends up in a directory named after its default branch, next to
    a new git-worktree-config.yaml:

      gwt init git@github.com:acme/app.git
    """
    if not repository_url.strip():
        raise UsageError("Repository URL is required", usage=INIT_USAGE)

    repo_name = repository_name_from_url(repository_url.strip())
    if not is_plain_directory_name(repo_name):
        raise UsageError(f"Cannot derive a directory name from '{repository_url}'", usage=INIT_USAGE)

    project_root = ctx.cwd
    clone_dir = project_root / repo_name

    _remove_existing(clone_dir)

    user_output(f"Cloning {click.style(repository_url, fg='cyan')}...")
    ctx.git.clone(project_root, repository_url, repo_name)

    branch = ctx.git.get_current_branch(clone_dir)
    logger.debug("Cloned %s on branch %s", repository_url, branch)

    worktree_dir = project_root / branch
    if worktree_dir != clone_dir:
        _move_clone(clone_dir, worktree_dir)

    config = ProjectConfig(
        repository_url=repository_url,
        main_branch=branch,
        created_at=ctx.time.now().isoformat(),
        hooks=ProjectHooks.disabled_examples(),
    )
    save_config(project_root / CONFIG_FILENAME, config)

    user_output(click.style("✓", fg="green") + f" Initialized worktree project in {project_root}")
    user_output(f"  Main worktree: {worktree_dir} [{click.style(branch, fg='yellow')}]")
    user_output(f"  Config: {CONFIG_FILENAME}")

    ctx.hooks.run(
        "postInit",
        worktree_dir,
        HookContext(branch_name=branch, worktree_path=str(worktree_dir)),
    )
