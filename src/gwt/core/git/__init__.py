"""Git operations subpackage.

This subpackage provides abstractions over git operations with support for
testing via fakes and verbose output via a printing wrapper.
"""

from gwt.core.git.abc import Git, Worktree
from gwt.core.git.parsing import parse_worktree_porcelain
from gwt.core.git.printing import PrintingGit
from gwt.core.git.real import RealGit

__all__ = [
    "Git",
    "PrintingGit",
    "RealGit",
    "Worktree",
    "parse_worktree_porcelain",
]
