"""Resolution and validation of configured repository paths."""

import os
import re
import stat
from typing import List

from git_worktree_keeper.models.repository import RepoInput
from git_worktree_keeper.logging_config import get_logger

logger = get_logger(__name__)

_SEPARATORS = re.compile(r"[\n,]")


def parse_path_inputs(raw_value: str) -> List[str]:
    """Split a newline- or comma-separated string into distinct, non-empty entries.

    Order of first appearance is preserved.
    """
    values = (item.strip() for item in _SEPARATORS.split(raw_value or ""))
    return list(dict.fromkeys(value for value in values if value))


def resolve_configured_path(input_path: str) -> str:
    """Resolve a configured entry to an absolute path.

    ``~`` and ``~/...`` are expanded against the home directory; anything else
    is made absolute against the current working directory. Symlinks are not
    followed and the path does not need to exist.
    """
    home = os.path.expanduser("~")
    if input_path == "~":
        return home
    if input_path.startswith("~/"):
        return os.path.normpath(os.path.join(home, input_path[2:]))
    return os.path.abspath(input_path)


def resolve_repositories(raw_value: str) -> List[RepoInput]:
    """Resolve configured repositories, collapsing entries that point to the same path.

    The first raw spelling seen for a resolved path is the one kept.
    """
    repos: dict = {}
    for repo_input in parse_path_inputs(raw_value):
        resolved = resolve_configured_path(repo_input)
        if resolved in repos:
            logger.debug(f"Skipping {repo_input!r}: same path as {repos[resolved].input!r}")
            continue
        repos[resolved] = RepoInput(input=repo_input, resolved=resolved)

    return list(repos.values())


def is_directory(target_path: str) -> bool:
    """Check that a path exists and is a directory.

    I/O errors (permission denied, name too long, ...) count as "not a directory".
    """
    try:
        info = os.stat(target_path)
    except (OSError, ValueError) as e:
        # ValueError covers paths with embedded NUL bytes
        logger.debug(f"Could not stat {target_path}: {e}")
        return False
    return stat.S_ISDIR(info.st_mode)
