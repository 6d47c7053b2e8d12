"""Worker-count helpers for running git status queries in parallel."""

import os
import sys
from typing import Any, Dict, Optional

# Upper bound on concurrent status queries
MAX_WORKERS = 32


def is_free_threading_enabled() -> bool:
    """Detect if Python is running with the GIL disabled (3.13+ free-threaded build)."""
    is_gil_enabled = getattr(sys, "_is_gil_enabled", None)
    if is_gil_enabled is None:
        return False
    return not is_gil_enabled()


def get_python_threading_mode() -> str:
    """Describe the interpreter's threading mode for debug output."""
    if not hasattr(sys, "_is_gil_enabled"):
        return "GIL-enabled (Python < 3.13)"
    return "free-threading" if is_free_threading_enabled() else "GIL-enabled"


def get_optimal_worker_count(user_specified: Optional[int] = None, task_count: Optional[int] = None) -> int:
    """Pick a worker count for classifying worktrees.

    Args:
        user_specified: Worker count from configuration, if any
        task_count: Number of worktrees to classify; the pool never exceeds it

    Returns:
        Number of workers, always at least 1
    """
    if user_specified is not None and user_specified > 0:
        workers = user_specified
    else:
        # I/O-bound: each task waits on git subprocesses
        workers = min(MAX_WORKERS, (os.cpu_count() or 1) + 4)

    if task_count is not None:
        workers = min(workers, task_count)
    return max(1, workers)


def get_threading_info() -> Dict[str, Any]:
    """Summarise the threading configuration for --debug output."""
    return {
        "mode": get_python_threading_mode(),
        "free_threading": is_free_threading_enabled(),
        "cpu_count": os.cpu_count() or 1,
        "optimal_workers": get_optimal_worker_count(),
        "python_version": f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
    }
