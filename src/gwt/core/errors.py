"""Domain errors raised by gwt operations.

Every fatal condition an operation can hit is expressed as a GwtError subclass.
The CLI error boundary turns these into a single red "Error:" line and exit code 1.
Discovery code never raises these for plain absence; it returns None or [] instead.
"""


class GwtError(Exception):
    """Base class for all user-facing gwt errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UsageError(GwtError):
    """A required argument was missing or empty."""

    def __init__(self, message: str, usage: str | None = None) -> None:
        super().__init__(message)
        self.usage = usage


class NotAProjectError(GwtError):
    """Neither inside a git working tree nor in a directory holding the project config."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "Not in a git repository or project root with git-worktree-config.yaml"
        )


class NoWorktreesFoundError(GwtError):
    """A project root was found but no worktree could anchor git commands."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "No existing worktrees found in project root. Create one first using 'gwt init'."
        )


class TargetNotFoundError(GwtError):
    """An identifier did not match any known worktree.

    `available` holds one display line per known worktree so the CLI can show
    the user what they could have meant.
    """

    def __init__(self, message: str, available: list[str]) -> None:
        super().__init__(message)
        self.available = available


class ProtectedTargetError(GwtError):
    """Attempt to remove the bare/main repository entry."""


class SubprocessError(GwtError):
    """A wrapped git or shell invocation failed."""

    def __init__(self, message: str, returncode: int | None = None, stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class ConfigError(GwtError):
    """The project config file could not be read or parsed."""
