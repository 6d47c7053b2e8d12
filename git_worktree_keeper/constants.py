"""Shared constants for git-worktree-keeper."""

from dataclasses import dataclass
from typing import List


@dataclass
class ColumnDefinition:
    """Definition of a table column."""

    key: str
    label: str
    width: int = 0  # 0 means auto-width


COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("branch", "Branch", 30),
    ColumnDefinition("status", "Status", 22),
    ColumnDefinition("path", "Path", 0),
]


# Symbol constants
SYMBOL_AHEAD = "↑"
SYMBOL_BEHIND = "↓"
SYMBOL_ERROR = "⚠"

DETACHED_TITLE = "Detached"
UNKNOWN_BRANCH_TITLE = "unknown"


class StatusStyleType:
    """Style types for worktree status labels."""

    DIRTY = "dirty"
    DIVERGED = "diverged"
    AHEAD = "ahead"
    BEHIND = "behind"
    SYNCED = "synced"


# CLI colors (Rich color names)
CLI_COLORS = {
    StatusStyleType.DIRTY: "dark_orange",
    StatusStyleType.DIVERGED: "magenta",
    StatusStyleType.AHEAD: "blue",
    StatusStyleType.BEHIND: "yellow",
    StatusStyleType.SYNCED: "green",
}


LEGEND_TEXT = """
Legend:
↑ = Commits to push       ↓ = Commits to pull
⚠ = Status unknown (git status failed)

Colors:
Orange = Uncommitted changes    Magenta = Diverged from upstream
Blue = Ahead of upstream        Yellow = Behind upstream
Green = Synced or no upstream
"""
