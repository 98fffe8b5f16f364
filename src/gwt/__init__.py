"""gwt - manage a project of sibling git worktrees."""
