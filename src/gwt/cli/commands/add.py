"""Add command - create a worktree for a branch inside the project."""

import logging

import click

from gwt.cli.core import discover_project, load_project_config
from gwt.cli.error_boundary import cli_error_boundary
from gwt.core.context import GwtContext
from gwt.core.errors import UsageError
from gwt.core.hooks import HookContext
from gwt.core.output import machine_output, user_output

logger = logging.getLogger(__name__)

DEFAULT_MAIN_BRANCH = "main"


@click.command("add")
@click.argument("branch_name", required=False, default="")
@click.option(
    "--print-path",
    is_flag=True,
    help="Also print the new worktree path to stdout (for shell integration).",
)
@click.pass_obj
@cli_error_boundary
def add_cmd(ctx: GwtContext, branch_name: str, print_path: bool) -> None:
    """Create a worktree for BRANCH_NAME at <project root>/BRANCH_NAME.

    An existing local branch is checked out as-is. A branch that only exists
    on origin is created from it. Anything else becomes a new branch started
    from the project's main branch.
    """
    if not branch_name.strip():
        raise UsageError("Branch name is required", usage="gwt add <branch-name>")

    location = discover_project(ctx)
    worktree_path = location.root / branch_name
    working_dir = location.working_dir

    config = load_project_config(location.root)
    if config is not None and config.main_branch:
        main_branch = config.main_branch
    else:
        main_branch = ctx.git.get_remote_default_branch(working_dir) or DEFAULT_MAIN_BRANCH
    logger.debug("Base branch for new worktrees: %s", main_branch)

    user_output(
        f"Creating worktree for {click.style(branch_name, fg='yellow')} at {worktree_path}"
    )

    if ctx.git.has_local_branch(working_dir, branch_name):
        user_output("Using existing local branch")
        ctx.git.add_worktree(
            working_dir, worktree_path, branch=branch_name, start_point=None, create_branch=False
        )
    elif ctx.git.has_remote_branch(working_dir, branch_name):
        user_output(f"Tracking remote branch origin/{branch_name}")
        ctx.git.add_worktree(
            working_dir,
            worktree_path,
            branch=branch_name,
            start_point=f"origin/{branch_name}",
            create_branch=True,
        )
    elif ctx.git.has_remote_branch(working_dir, main_branch):
        user_output(f"Creating new branch from origin/{main_branch}")
        ctx.git.add_worktree(
            working_dir,
            worktree_path,
            branch=branch_name,
            start_point=f"origin/{main_branch}",
            create_branch=True,
            no_track=True,
        )
    else:
        user_output(f"Creating new branch from {main_branch}")
        ctx.git.add_worktree(
            working_dir,
            worktree_path,
            branch=branch_name,
            start_point=main_branch,
            create_branch=True,
        )

    user_output(click.style("✓", fg="green") + f" Worktree created at {worktree_path}")

    ctx.hooks.run(
        "postAdd",
        worktree_path,
        HookContext(branch_name=branch_name, worktree_path=str(worktree_path)),
    )

    if print_path:
        machine_output(str(worktree_path))
