"""Formatting utilities for git-worktree-keeper.

- status: Worktree status labels, colors and titles
"""

from .status import (
    format_status_label,
    format_sync_counts,
    format_worktree_title,
    get_status_style_type,
)

__all__ = [
    "format_status_label",
    "format_sync_counts",
    "format_worktree_title",
    "get_status_style_type",
]
