"""Worktree data models."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class WorktreeStatus(Enum):
    """Combined dirtiness and sync status of a worktree."""
    SYNCED = "synced"
    CLEAN = "clean"
    DIRTY = "dirty"


@dataclass(frozen=True)
class SyncInfo:
    """Commit divergence between a checkout and its upstream."""

    ahead: int
    behind: int

    def __post_init__(self):
        if self.ahead < 0 or self.behind < 0:
            raise ValueError(f"ahead/behind must be non-negative, got {self.ahead}/{self.behind}")

    @property
    def has_ahead(self) -> bool:
        return self.ahead > 0

    @property
    def has_behind(self) -> bool:
        return self.behind > 0

    @property
    def is_synced(self) -> bool:
        return self.ahead == 0 and self.behind == 0


@dataclass(frozen=True)
class Worktree:
    """Information about a git worktree."""

    path: str
    branch: Optional[str] = None  # None when detached or no symbolic ref
    detached: bool = False
    status: WorktreeStatus = WorktreeStatus.CLEAN
    sync: Optional[SyncInfo] = None  # None = no upstream configured
    error: Optional[str] = None  # Set when the status query failed

    def __post_init__(self):
        if self.detached and self.branch is not None:
            raise ValueError(f"Detached worktree {self.path} cannot carry branch {self.branch!r}")

    def with_status(
        self,
        status: WorktreeStatus,
        sync: Optional[SyncInfo] = None,
        error: Optional[str] = None,
    ) -> "Worktree":
        """Return a copy enriched with classification results."""
        return replace(self, status=status, sync=sync, error=error)

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "branch": self.branch,
            "detached": self.detached,
            "status": self.status.value,
            "sync": {"ahead": self.sync.ahead, "behind": self.sync.behind} if self.sync else None,
            "error": self.error,
        }

    def __str__(self) -> str:
        """String representation of worktree."""
        name = "(detached)" if self.detached else (self.branch or "(unknown)")
        return f"{name} @ {self.path} [{self.status.value}]"
