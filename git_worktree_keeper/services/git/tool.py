"""Narrow interface to the git executable.

Every query runs as its own ``git`` process through GitPython, so instances
can be shared between threads.
"""

import re
from typing import Optional, Protocol

import git

from git_worktree_keeper.exceptions import GitOperationError
from git_worktree_keeper.logging_config import get_logger
from git_worktree_keeper.models.worktree import SyncInfo

logger = get_logger(__name__)

# GitPython wraps stderr as "\n  stderr: '<text>'"
_STDERR_WRAPPER = re.compile(r"^stderr: '(.*)'$", re.DOTALL)


class VersionControlTool(Protocol):
    """The three queries the scanner needs from version control."""

    def list_worktrees_output(self, repo_path: str) -> str:
        """Raw ``git worktree list --porcelain`` output for a repository."""
        ...

    def is_dirty(self, worktree_path: str) -> bool:
        """True if the worktree has staged, unstaged or untracked changes."""
        ...

    def get_divergence(self, worktree_path: str) -> SyncInfo:
        """Ahead/behind counts against the upstream of the checked-out branch."""
        ...


def _describe_command_error(e: git.exc.CommandError) -> str:
    """Build a readable message from a failed GitPython command."""
    stderr = (e.stderr if hasattr(e, "stderr") else "") or ""
    stderr = stderr.strip()
    match = _STDERR_WRAPPER.match(stderr)
    if match:
        stderr = match.group(1).strip()
    status = e.status if hasattr(e, "status") else "unknown"

    if isinstance(e, git.exc.GitCommandNotFound):
        return f"could not run git: {status}"
    if stderr:
        return f"(exit {status}) {stderr}"
    return f"exit code {status}"


class GitTool:
    """VersionControlTool backed by the git command line via GitPython."""

    def _git(self, path: str) -> git.Git:
        """Get a git command runner rooted at ``path``."""
        return git.Git(path)

    def _run(self, operation: str, path: str, command: str, *args: str) -> str:
        """Run ``git <command> <args>`` inside ``path`` and return its standard output."""
        logger.debug(f"Running git {operation} in {path}")
        try:
            return getattr(self._git(path), command)(*args)
        except git.exc.CommandError as e:
            raise GitOperationError(operation, path, _describe_command_error(e)) from e

    def list_worktrees_output(self, repo_path: str) -> str:
        return self._run("worktree list", repo_path, "worktree", "list", "--porcelain")

    def is_dirty(self, worktree_path: str) -> bool:
        output = self._run("status", worktree_path, "status", "--porcelain")
        return bool(output.strip())

    def get_divergence(self, worktree_path: str) -> SyncInfo:
        # Left side counts commits only on the upstream, right side only on HEAD
        output = self._run(
            "rev-list",
            worktree_path,
            "rev_list",
            "--left-right",
            "--count",
            "@{upstream}...HEAD",
        )
        return parse_divergence_output(output, worktree_path)


def parse_divergence_output(output: str, path: Optional[str] = None) -> SyncInfo:
    """Parse ``<behind> <ahead>`` as printed by ``rev-list --left-right --count``."""
    parts = output.split()
    if len(parts) != 2:
        raise GitOperationError("rev-list", path, f"unexpected output {output!r}")
    try:
        behind, ahead = (int(part) for part in parts)
    except ValueError as e:
        raise GitOperationError("rev-list", path, f"unexpected output {output!r}") from e
    if behind < 0 or ahead < 0:
        raise GitOperationError("rev-list", path, f"unexpected output {output!r}")
    return SyncInfo(ahead=ahead, behind=behind)
