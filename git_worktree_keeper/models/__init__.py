"""Data models for git-worktree-keeper."""

from .worktree import SyncInfo, Worktree, WorktreeStatus
from .repository import InvalidRepo, RepoInput, RepoWorktrees, ScanResult

__all__ = [
    "SyncInfo",
    "Worktree",
    "WorktreeStatus",
    "InvalidRepo",
    "RepoInput",
    "RepoWorktrees",
    "ScanResult",
]
