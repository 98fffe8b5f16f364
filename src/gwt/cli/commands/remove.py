"""Remove command - delete a worktree and its branch."""

import logging
import os
from pathlib import Path

import click

from gwt.cli.ensure import Ensure
from gwt.cli.error_boundary import cli_error_boundary
from gwt.core.config_store import find_config_dir
from gwt.core.context import GwtContext
from gwt.core.errors import ProtectedTargetError, SubprocessError, TargetNotFoundError
from gwt.core.git.abc import Worktree
from gwt.core.hooks import HookContext
from gwt.core.output import machine_output, user_output, warning_output
from gwt.core.user_input import is_affirmative
from gwt.core.worktree_registry import (
    clean_branch_name,
    display_branch,
    find_by_name_or_path,
    find_containing_worktree,
    format_worktree_choices,
    is_main_branch,
    select_git_working_dir,
)

logger = logging.getLogger(__name__)

CONFIRM_PROMPT = "Are you sure you want to remove this worktree? (y/N)"


def _resolve_target(ctx: GwtContext, worktrees: list[Worktree], identifier: str | None) -> Worktree:
    if identifier is None:
        current = Ensure.not_none(
            ctx.registry.current_worktree_path(),
            "Not inside a worktree. Specify which worktree to remove: gwt remove <name>",
        )
        return Ensure.not_none(
            find_containing_worktree(worktrees, current),
            f"Current directory {current} is not a known worktree of this project",
        )

    target = find_by_name_or_path(worktrees, identifier)
    if target is None:
        raise TargetNotFoundError(
            f"Worktree '{identifier}' not found", format_worktree_choices(worktrees)
        )
    return target


def _is_inside(path: Path, directory: Path) -> bool:
    return path == directory or path.is_relative_to(directory)


def _remove_impl(ctx: GwtContext, identifier: str | None, yes: bool) -> None:
    worktrees = ctx.registry.list_all(require_anchor=True)
    Ensure.not_empty(worktrees, "No worktrees found.")

    target = _resolve_target(ctx, worktrees, identifier)
    if target.bare:
        raise ProtectedTargetError("Cannot remove the main (bare) repository")

    removing_current = _is_inside(ctx.cwd, target.path)

    user_output(f"Worktree: {click.style(str(target.path), fg='cyan')}")
    user_output(f"Branch:   {click.style(display_branch(target), fg='yellow')}")
    if removing_current:
        warning_output("⚠️  You are about to remove the worktree you are currently in.")

    if not yes:
        answer = ctx.user_input.ask(CONFIRM_PROMPT)
        if not is_affirmative(answer):
            user_output("Removal cancelled.")
            return

    working = Ensure.not_none(
        select_git_working_dir(worktrees, target),
        "No other worktree available to run git from",
    )
    config_dir = find_config_dir(working.path)
    project_root = config_dir if config_dir is not None else working.path.parent
    logger.debug("Removing %s from %s (project root %s)", target.path, working.path, project_root)

    ctx.git.remove_worktree(working.path, target.path, force=True)
    user_output(click.style("✓", fg="green") + f" Removed worktree {target.path}")

    branch = clean_branch_name(target.branch) if target.branch else None
    if branch is not None and not is_main_branch(branch):
        try:
            ctx.git.delete_branch(working.path, branch)
            user_output(click.style("✓", fg="green") + f" Deleted branch {branch}")
        except SubprocessError as e:
            warning_output(f"⚠️  Could not delete branch {branch}: {e.stderr or e.message}")

    ctx.hooks.run(
        "postRemove",
        project_root,
        HookContext(branch_name=display_branch(target), worktree_path=str(target.path)),
    )

    if removing_current and project_root.is_dir():
        os.chdir(project_root)
        user_output(f"Run: cd {project_root}")
        machine_output(str(project_root))


@click.command("remove")
@click.argument("identifier", required=False)
@click.option("-y", "--yes", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_obj
@cli_error_boundary
def remove_cmd(ctx: GwtContext, identifier: str | None, yes: bool) -> None:
    """Remove a worktree by branch name or directory name.

    Without IDENTIFIER, removes the worktree containing the current directory.
    The branch is deleted too, unless it is one of the main branches.
    """
    _remove_impl(ctx, identifier, yes)


# Register rm as a hidden alias (won't show in help)
@click.command("rm", hidden=True)
@click.argument("identifier", required=False)
@click.option("-y", "--yes", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_obj
@cli_error_boundary
def rm_cmd(ctx: GwtContext, identifier: str | None, yes: bool) -> None:
    """Remove a worktree (alias of 'remove')."""
    _remove_impl(ctx, identifier, yes)
