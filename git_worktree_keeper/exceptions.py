"""Custom exceptions for git-worktree-keeper"""

from typing import Optional


class WorktreeKeeperError(Exception):
    """Base exception for all git-worktree-keeper errors."""
    pass


class GitOperationError(WorktreeKeeperError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, path: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.path = path
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if path:
            error_msg += f" in '{path}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class ConfigurationError(WorktreeKeeperError, ValueError):
    """Exception raised for invalid configuration values."""
    pass
