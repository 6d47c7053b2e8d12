"""Status label and style formatting for worktrees."""

from git_worktree_keeper.models.worktree import Worktree, WorktreeStatus
from git_worktree_keeper.constants import (
    DETACHED_TITLE,
    SYMBOL_AHEAD,
    SYMBOL_BEHIND,
    SYMBOL_ERROR,
    UNKNOWN_BRANCH_TITLE,
    StatusStyleType,
)


def format_worktree_title(worktree: Worktree) -> str:
    """
    Format the display title of a worktree.

    Args:
        worktree: Worktree to describe

    Returns:
        "Detached" for detached checkouts, otherwise the branch name or "unknown"
    """
    if worktree.detached:
        return DETACHED_TITLE
    return worktree.branch or UNKNOWN_BRANCH_TITLE


def format_sync_counts(worktree: Worktree) -> str:
    """
    Format non-zero ahead/behind counts, behind first.

    Example:
        "↓2 ↑1"
    """
    sync = worktree.sync
    if sync is None:
        return ""
    parts = []
    if sync.has_behind:
        parts.append(f"{SYMBOL_BEHIND}{sync.behind}")
    if sync.has_ahead:
        parts.append(f"{SYMBOL_AHEAD}{sync.ahead}")
    return " ".join(parts)


def format_status_label(worktree: Worktree) -> str:
    """
    Format the status of a worktree as display text.

    Args:
        worktree: Classified worktree

    Returns:
        One of "Dirty", "Dirty (↓b ↑a)", "Diverged (↓b ↑a)", "Ahead (↑a)",
        "Behind (↓b)" or "Synced"; prefixed with a warning symbol when the
        status query failed
    """
    if worktree.error:
        return f"{SYMBOL_ERROR} Unknown"

    counts = format_sync_counts(worktree)
    sync = worktree.sync
    has_ahead = sync is not None and sync.has_ahead
    has_behind = sync is not None and sync.has_behind

    if worktree.status == WorktreeStatus.DIRTY:
        return f"Dirty ({counts})" if counts else "Dirty"

    if has_ahead and has_behind:
        return f"Diverged ({counts})"
    if has_ahead:
        return f"Ahead ({counts})"
    if has_behind:
        return f"Behind ({counts})"

    return "Synced"


def get_status_style_type(worktree: Worktree) -> str:
    """
    Determine the style type for a worktree's status label.

    Returns:
        StatusStyleType constant
    """
    if worktree.status == WorktreeStatus.DIRTY:
        return StatusStyleType.DIRTY

    sync = worktree.sync
    has_ahead = sync is not None and sync.has_ahead
    has_behind = sync is not None and sync.has_behind

    if has_ahead and has_behind:
        return StatusStyleType.DIVERGED
    if has_ahead:
        return StatusStyleType.AHEAD
    if has_behind:
        return StatusStyleType.BEHIND
    return StatusStyleType.SYNCED
