"""Worktree listing for git-worktree-keeper."""

from typing import List, Optional

from git_worktree_keeper.models.worktree import Worktree
from git_worktree_keeper.logging_config import get_logger

logger = get_logger(__name__)

BRANCH_REF_PREFIX = "refs/heads/"


def parse_branch_name(branch_ref: str) -> str:
    """Turn ``refs/heads/feature/x`` into ``feature/x``; other refs are returned as-is."""
    if branch_ref.startswith(BRANCH_REF_PREFIX):
        return branch_ref[len(BRANCH_REF_PREFIX):]
    return branch_ref


def parse_worktree_list_output(stdout: str) -> List[Worktree]:
    """Parse ``git worktree list --porcelain`` output.

    Format (one group per worktree, main worktree first):
        worktree /path/to/worktree
        HEAD <sha>
        branch refs/heads/<name>     (or a bare "detached" line)

    A group runs from its ``worktree`` line up to the next one. Lines with
    other prefixes (HEAD, bare, locked, prunable, ...) are ignored.
    """
    worktrees: List[Worktree] = []
    current: Optional[dict] = None

    def flush():
        if current and current["path"]:
            worktrees.append(
                Worktree(
                    path=current["path"],
                    branch=None if current["detached"] else current["branch"],
                    detached=current["detached"],
                )
            )

    for raw_line in stdout.split("\n"):
        line = raw_line.rstrip("\r")

        if line.startswith("worktree "):
            flush()
            current = {"path": line[len("worktree "):], "branch": None, "detached": False}
            continue

        if current is None:
            continue

        if line.startswith("branch "):
            current["branch"] = parse_branch_name(line[len("branch "):])
        elif line == "detached":
            current["detached"] = True

    flush()
    return worktrees


class WorktreeLister:
    """Lists the worktrees of a repository."""

    def __init__(self, tool):
        """Initialize the lister.

        Args:
            tool: VersionControlTool used to run the listing command
        """
        self.tool = tool

    def list_worktrees(self, repo_path: str) -> List[Worktree]:
        """Get the worktrees of a repository in git's order.

        Raises:
            GitOperationError: If git cannot list worktrees for this path
        """
        output = self.tool.list_worktrees_output(repo_path)
        worktrees = parse_worktree_list_output(output)

        logger.debug(f"Found {len(worktrees)} worktrees in {repo_path}")
        for wt in worktrees:
            logger.debug(f"  {wt}")
        return worktrees
