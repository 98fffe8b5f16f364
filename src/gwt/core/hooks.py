"""Lifecycle hooks configured in the project config.

Hooks are shell commands listed per lifecycle point:

    hooks:
      postAdd:
        - npm install
        - echo "created ${branchName} at ${worktreePath}"
        - "# pre-commit install"   <- disabled

They run after the primary operation has already succeeded, so a failing hook
is reported as a warning and never turns into a failed command.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import click

from gwt.core.config_store import HookType, find_config
from gwt.core.errors import ConfigError
from gwt.core.output import user_output, warning_output
from gwt.core.shell import Shell

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HookContext:
    """Values substituted into hook commands.

    A field left as None keeps its `${...}` token in the command untouched.
    """

    branch_name: str | None = None
    worktree_path: str | None = None


def is_disabled(command: str) -> bool:
    """A command whose first non-blank character is `#` is commented out."""
    return command.lstrip().startswith("#")


def substitute_variables(command: str, context: HookContext) -> str:
    """Replace `${branchName}` and `${worktreePath}` with context values."""
    if context.branch_name is not None:
        command = command.replace("${branchName}", context.branch_name)
    if context.worktree_path is not None:
        command = command.replace("${worktreePath}", context.worktree_path)
    return command


class HookRunner:
    """Runs the hook commands configured for a lifecycle point.

    Args:
        shell: Shell integration used to execute each command
        verbose: Also report where the config was found and when nothing ran
    """

    def __init__(self, shell: Shell, *, verbose: bool = False) -> None:
        self._shell = shell
        self._verbose = verbose

    def run(self, hook_type: HookType, working_directory: Path, context: HookContext) -> None:
        """Run every enabled hook of hook_type inside working_directory.

        The config is looked up by walking upward from working_directory.
        Missing config, missing list and empty list all mean "nothing to do".
        """
        try:
            found = find_config(working_directory)
        except ConfigError as e:
            warning_output(f"⚠️  Skipping {hook_type} hooks: {e}")
            return

        if found is None:
            logger.debug("No config above %s; skipping %s hooks", working_directory, hook_type)
            return

        config_path, config = found
        if self._verbose:
            user_output(click.style(f"Using hooks from {config_path}", dim=True))

        commands = config.hooks.commands_for(hook_type) if config.hooks is not None else None
        if not commands:
            logger.debug("No %s hooks configured in %s", hook_type, config_path)
            return

        user_output(click.style(f"🪝 Running {hook_type} hooks...", fg="cyan"))

        for hook in commands:
            if is_disabled(hook):
                user_output("   " + click.style(f"Skipping commented hook: {hook}", fg="yellow"))
                continue

            command = substitute_variables(hook, context)
            user_output("   " + click.style(f"Executing: {command}", fg="blue"))
            self._run_one(command, working_directory)

    def _run_one(self, command: str, working_directory: Path) -> None:
        try:
            exit_code = self._shell.run_hook_command(command, working_directory)
        except OSError as e:
            warning_output(f"   ⚠️  Hook failed: {e}")
            return

        if exit_code != 0:
            warning_output(f"   ⚠️  Hook failed: Command failed with exit code {exit_code}")
            return

        user_output("   " + click.style("✓ Hook completed successfully", fg="green"))
