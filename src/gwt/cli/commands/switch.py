"""Switch command - print the path of a branch's worktree for the shell to cd into."""

import click

from gwt.cli.error_boundary import cli_error_boundary
from gwt.core.context import GwtContext
from gwt.core.errors import TargetNotFoundError
from gwt.core.hooks import HookContext
from gwt.core.output import machine_output, user_output
from gwt.core.worktree_registry import display_branch, find_by_branch

SWITCH_USAGE = "gwt switch <branch-name>"


@click.command("switch")
@click.argument("branch_name", required=False)
@click.pass_obj
@cli_error_boundary
def switch_cmd(ctx: GwtContext, branch_name: str | None) -> None:
    """Switch to the worktree that has BRANCH_NAME checked out.

    The worktree path is written to stdout, so a shell function can do:

      cd "$(gwt switch feature/login)"

    Without BRANCH_NAME, lists the branches you can switch to.
    """
    worktrees = ctx.registry.list_all(require_anchor=True)
    available = [f"  {display_branch(wt)}{' (bare)' if wt.bare else ''}" for wt in worktrees]

    if not branch_name:
        user_output("Available worktrees:")
        for line in available:
            user_output(line)
        user_output()
        user_output(f"Usage: {SWITCH_USAGE}")
        return

    target = find_by_branch(worktrees, branch_name)
    if target is None:
        raise TargetNotFoundError(
            f"No worktree found for branch '{branch_name}'",
            [line.strip() for line in available],
        )

    user_output(f"Switching to worktree: {click.style(str(target.path), fg='cyan')}")
    machine_output(str(target.path))

    ctx.hooks.run(
        "postSwitch",
        target.path,
        HookContext(branch_name=branch_name, worktree_path=str(target.path)),
    )
