"""List command - show every worktree of the project."""

import click

from gwt.cli.error_boundary import cli_error_boundary
from gwt.core.context import GwtContext
from gwt.core.git.abc import Worktree
from gwt.core.output import user_output
from gwt.core.worktree_registry import display_branch

PATH_HEADER = "PATH"
BRANCH_HEADER = "BRANCH"


def format_worktree_table(worktrees: list[Worktree]) -> list[str]:
    """Render worktrees as aligned PATH / BRANCH columns with a rule under the header."""
    rows = [(str(wt.path), display_branch(wt), wt.bare) for wt in worktrees]
    path_width = max([len(PATH_HEADER), *(len(path) for path, _, _ in rows)])
    branch_width = max([len(BRANCH_HEADER), *(len(branch) for _, branch, _ in rows)])

    lines = [
        f"{PATH_HEADER.ljust(path_width)}  {BRANCH_HEADER}",
        f"{'─' * path_width}  {'─' * branch_width}",
    ]
    for path, branch, bare in rows:
        suffix = " (bare)" if bare else ""
        lines.append(f"{path.ljust(path_width)}  {branch}{suffix}".rstrip())
    return lines


def _list_impl(ctx: GwtContext) -> None:
    worktrees = ctx.registry.list_all()
    if not worktrees:
        user_output("No worktrees found.")
        return

    for line in format_worktree_table(worktrees):
        user_output(line)


@click.command("list")
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: GwtContext) -> None:
    """List worktrees with their paths and branches."""
    _list_impl(ctx)


# Register ls as a hidden alias (won't show in help)
@click.command("ls", hidden=True)
@click.pass_obj
@cli_error_boundary
def ls_cmd(ctx: GwtContext) -> None:
    """List worktrees with their paths and branches (alias of 'list')."""
    _list_impl(ctx)
