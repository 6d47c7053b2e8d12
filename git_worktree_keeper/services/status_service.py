"""Service for determining worktree status"""

from typing import NamedTuple, Optional

from git_worktree_keeper.exceptions import GitOperationError
from git_worktree_keeper.models.worktree import SyncInfo, Worktree, WorktreeStatus
from git_worktree_keeper.logging_config import get_logger

logger = get_logger(__name__)


class StatusResult(NamedTuple):
    """Classification of a single worktree."""
    status: WorktreeStatus
    sync: Optional[SyncInfo] = None
    error: Optional[str] = None


def classify_status(dirty: bool, sync: Optional[SyncInfo]) -> WorktreeStatus:
    """Combine dirtiness and upstream divergence into one status.

    Local changes win over everything else. A clean worktree is only
    ``synced`` when it has an upstream and matches it exactly; ahead, behind,
    diverged and no-upstream all map to ``clean``.
    """
    if dirty:
        return WorktreeStatus.DIRTY
    if sync is not None and sync.is_synced:
        return WorktreeStatus.SYNCED
    return WorktreeStatus.CLEAN


class WorktreeStatusService:
    """Service for determining worktree status."""

    def __init__(self, tool):
        """Initialize the service.

        Args:
            tool: VersionControlTool used for the status and divergence queries
        """
        self.tool = tool

    def get_sync_info(self, worktree_path: str) -> Optional[SyncInfo]:
        """Get ahead/behind counts, or None when no upstream is configured."""
        try:
            return self.tool.get_divergence(worktree_path)
        except GitOperationError as e:
            # Expected for local-only branches and detached checkouts
            logger.debug(f"No upstream information for {worktree_path}: {e}")
            return None

    def get_worktree_status(self, worktree_path: str) -> StatusResult:
        """Classify one worktree.

        A failing status query does not raise: the worktree is reported as
        ``clean`` without sync information and the failure message is returned
        in ``error``.
        """
        try:
            dirty = self.tool.is_dirty(worktree_path)
        except GitOperationError as e:
            logger.warning(f"Could not check worktree status for {worktree_path}: {e}")
            return StatusResult(WorktreeStatus.CLEAN, None, str(e))

        sync = self.get_sync_info(worktree_path)
        status = classify_status(dirty, sync)
        logger.debug(f"{worktree_path}: dirty={dirty}, sync={sync}, status={status.value}")
        return StatusResult(status, sync)

    def classify(self, worktree: Worktree) -> Worktree:
        """Return ``worktree`` enriched with its status."""
        result = self.get_worktree_status(worktree.path)
        return worktree.with_status(result.status, result.sync, result.error)
