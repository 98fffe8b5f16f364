"""Application context with dependency injection."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from gwt.core.git.abc import Git
from gwt.core.git.printing import PrintingGit
from gwt.core.git.real import RealGit
from gwt.core.hooks import HookRunner
from gwt.core.shell import RealShell, Shell
from gwt.core.time import RealTime, Time
from gwt.core.user_input import RealUserInput, UserInput
from gwt.core.worktree_registry import WorktreeRegistry

DEBUG_ENV_VAR = "GWT_DEBUG"


@dataclass(frozen=True)
class GwtContext:
    """Immutable context holding all dependencies for gwt operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    shell: Shell
    user_input: UserInput
    time: Time
    cwd: Path  # Current working directory at CLI invocation
    verbose: bool

    @property
    def registry(self) -> WorktreeRegistry:
        return WorktreeRegistry(self.git, self.cwd)

    @property
    def hooks(self) -> HookRunner:
        return HookRunner(self.shell, verbose=self.verbose)

    @staticmethod
    def for_test(
        git: Git | None = None,
        shell: Shell | None = None,
        user_input: UserInput | None = None,
        time: Time | None = None,
        cwd: Path | None = None,
        verbose: bool = False,
    ) -> "GwtContext":
        """Create test context with optional pre-configured integration classes.

        Any integration not given is replaced by its in-memory fake.

        Example:
            >>> git = FakeGit(worktrees={Path("/proj/main"): [...]})
            >>> ctx = GwtContext.for_test(git=git, cwd=Path("/proj/main"))
        """
        from gwt.core.git.fake import FakeGit
        from tests.fakes.shell import FakeShell
        from tests.fakes.time import FakeTime
        from tests.fakes.user_input import FakeUserInput

        return GwtContext(
            git=git if git is not None else FakeGit(),
            shell=shell if shell is not None else FakeShell(),
            user_input=user_input if user_input is not None else FakeUserInput(),
            time=time if time is not None else FakeTime(),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
            verbose=verbose,
        )


def configure_logging(verbose: bool) -> None:
    """Turn on DEBUG logging for --verbose or GWT_DEBUG=1."""
    if verbose or os.environ.get(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


def create_context(*, verbose: bool) -> GwtContext:
    """Create production context with real implementations.

    Called once at CLI entry point.
    """
    git: Git = RealGit()
    if verbose:
        git = PrintingGit(git)

    return GwtContext(
        git=git,
        shell=RealShell.from_environment(),
        user_input=RealUserInput(),
        time=RealTime(),
        cwd=Path.cwd(),
        verbose=verbose,
    )
