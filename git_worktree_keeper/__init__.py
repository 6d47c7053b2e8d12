"""
git-worktree-keeper - An overview of git worktrees across repositories
"""

from .__version__ import __version__
from .services.scanner import WorktreeScanner, scan_worktrees

__all__ = ["WorktreeScanner", "scan_worktrees", "__version__"]
