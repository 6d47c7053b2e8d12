"""Git-related services for git-worktree-keeper."""

from .tool import GitTool, VersionControlTool
from .worktrees import WorktreeLister, parse_worktree_list_output

__all__ = [
    "GitTool",
    "VersionControlTool",
    "WorktreeLister",
    "parse_worktree_list_output",
]
