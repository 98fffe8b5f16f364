"""Shell integration for running user hook commands.

Hook commands are arbitrary shell strings from the project config. They run
through the user's login shell interpreter with the terminal's stdout/stderr
attached, so tools like npm or pip print their progress live.
"""

import logging
import os
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_SHELL = "/bin/sh"


class Shell(ABC):
    """Abstract interface for executing hook commands."""

    @abstractmethod
    def run_hook_command(self, command: str, cwd: Path) -> int:
        """Run a shell command string with inherited stdio.

        Args:
            command: Command line to hand to the shell interpreter
            cwd: Working directory for the command

        Returns:
            Exit code of the command

        Raises:
            OSError: If the shell interpreter cannot be launched
        """
        ...


def resolve_shell_path(environ: dict[str, str] | None = None) -> str:
    """Pick the hook interpreter from $SHELL, defaulting to a POSIX shell."""
    env = environ if environ is not None else dict(os.environ)
    shell_path = env.get("SHELL", "").strip()
    if not shell_path:
        return DEFAULT_SHELL
    return shell_path


class RealShell(Shell):
    """Production implementation using subprocess.

    The interpreter is fixed at construction time rather than looked up on
    every call, so callers control it explicitly.
    """

    def __init__(self, shell_path: str = DEFAULT_SHELL) -> None:
        self._shell_path = shell_path

    @property
    def shell_path(self) -> str:
        return self._shell_path

    @staticmethod
    def from_environment() -> "RealShell":
        """Create a shell runner using the invoking user's default shell."""
        return RealShell(resolve_shell_path())

    def run_hook_command(self, command: str, cwd: Path) -> int:
        env = dict(os.environ)
        env["FORCE_COLOR"] = "1"
        logger.debug("Hook via %s in %s: %s", self._shell_path, cwd, command)
        result = subprocess.run(
            [self._shell_path, "-c", command],
            cwd=cwd,
            env=env,
            check=False,
        )
        return result.returncode
