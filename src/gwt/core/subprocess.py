"""Subprocess execution with rich error context.

Two entry points cover every external command gwt runs:

- run_subprocess_with_context(): captures output, used for queries whose stdout
  gwt parses (worktree listing, branch lookups, symbolic refs).
- run_streaming(): connects the child's stdout/stderr directly to the terminal,
  used for long-running mutations (clone, worktree add/remove) so progress is
  visible as it happens.

Both translate failures into SubprocessError with the operation context, the
command line, the exit code and any captured stderr.
"""

import logging
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

from gwt.core.errors import SubprocessError

logger = logging.getLogger(__name__)


def _format_command(cmd: Sequence[str]) -> str:
    return " ".join(str(arg) for arg in cmd)


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Execute subprocess capturing output, with enriched error reporting.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
            (e.g. "list worktrees"), used in the error message
        cwd: Working directory for command execution
        check: Whether to raise on non-zero exit (default: True)

    Returns:
        CompletedProcess with text stdout/stderr

    Raises:
        SubprocessError: If the command fails or the binary is not found
    """
    logger.debug("Running %s (cwd=%s)", _format_command(cmd), cwd)
    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=check,
        )
    except subprocess.CalledProcessError as e:
        error_msg = f"Failed to {operation_context}"
        error_msg += f"\nCommand: {_format_command(cmd)}"
        error_msg += f"\nExit code: {e.returncode}"

        stderr_text = ""
        if e.stdout:
            stdout_stripped = e.stdout.strip()
            if stdout_stripped:
                error_msg += f"\nstdout: {stdout_stripped}"

        if e.stderr:
            stderr_text = e.stderr.strip()
            if stderr_text:
                error_msg += f"\nstderr: {stderr_text}"

        raise SubprocessError(error_msg, returncode=e.returncode, stderr=stderr_text) from e

    except FileNotFoundError as e:
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {_format_command(cmd)}"
        raise SubprocessError(error_msg) from e


def run_streaming(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> None:
    """Execute subprocess with stdout/stderr inherited from this process.

    Output appears on the user's terminal in real time; nothing is buffered.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
        cwd: Working directory for command execution
        env: Full environment for the child (None inherits ours)

    Raises:
        SubprocessError: If the command exits non-zero or cannot be launched
    """
    logger.debug("Streaming %s (cwd=%s)", _format_command(cmd), cwd)
    try:
        result = subprocess.run(cmd, cwd=cwd, env=env, check=False)
    except FileNotFoundError as e:
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {_format_command(cmd)}"
        raise SubprocessError(error_msg) from e

    if result.returncode != 0:
        error_msg = f"Failed to {operation_context}"
        error_msg += f"\nCommand: {_format_command(cmd)}"
        error_msg += f"\nExit code: {result.returncode}"
        raise SubprocessError(error_msg, returncode=result.returncode)
