"""Scanning of configured repositories for worktrees."""

import locale
import os
import unicodedata
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Union

from git_worktree_keeper.config import Config
from git_worktree_keeper.models.repository import (
    InvalidRepo,
    RepoInput,
    RepoWorktrees,
    ScanResult,
)
from git_worktree_keeper.models.worktree import Worktree, WorktreeStatus
from git_worktree_keeper.services.git.tool import GitTool
from git_worktree_keeper.services.git.worktrees import WorktreeLister
from git_worktree_keeper.services.path_resolver import is_directory, resolve_repositories
from git_worktree_keeper.services.status_service import WorktreeStatusService
from git_worktree_keeper.utils.threading import get_optimal_worker_count
from git_worktree_keeper.logging_config import get_logger

logger = get_logger(__name__)

DIRECTORY_NOT_FOUND = "Directory not found"
UNREADABLE_DIRECTORY = "Unable to read directory"


def fold_name(name: str) -> str:
    """Case- and accent-insensitive form of a name ('Émile' -> 'emile')."""
    decomposed = unicodedata.normalize("NFKD", name)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


def repo_sort_key(repo: RepoWorktrees):
    """Order by folded name, then by the current collation, then by the raw name."""
    return (fold_name(repo.name), locale.strxfrm(repo.name.casefold()), repo.name)


class WorktreeScanner:
    """Scans repositories and classifies every worktree they contain."""

    def __init__(
        self,
        config: Union[Config, dict, None] = None,
        tool=None,
        directory_check: Callable[[str], bool] = is_directory,
    ):
        """Initialize the scanner.

        Args:
            config: Configuration dict or Config object
            tool: VersionControlTool; defaults to the git command line
            directory_check: Predicate used to validate repository roots
        """
        if config is None:
            config = Config()
        elif isinstance(config, dict):
            config = Config.from_dict(config)
        self.config = config
        self.tool = tool if tool is not None else GitTool()
        self.directory_check = directory_check
        self.lister = WorktreeLister(self.tool)
        self.status_service = WorktreeStatusService(self.tool)

    def scan(self, raw_repositories: Optional[str] = None) -> ScanResult:
        """Scan every configured repository.

        Args:
            raw_repositories: Newline- or comma-separated paths; defaults to
                ``config.repositories``

        Returns:
            ScanResult with repos sorted by name and invalid repos in the order found
        """
        if raw_repositories is None:
            raw_repositories = self.config.repositories

        repos = resolve_repositories(raw_repositories)
        logger.info(f"Scanning {len(repos)} repositories")

        result = ScanResult()
        for repo in repos:
            scanned = self.scan_repository(repo)
            if isinstance(scanned, InvalidRepo):
                logger.info(f"Skipping {repo.input}: {scanned.reason}")
                result.invalid_repos.append(scanned)
            else:
                result.repos.append(scanned)

        result.repos.sort(key=repo_sort_key)
        logger.info(
            f"Found {result.worktree_count} worktrees in {len(result.repos)} repositories "
            f"({len(result.invalid_repos)} invalid)"
        )
        return result

    def scan_repository(self, repo: RepoInput) -> Union[RepoWorktrees, InvalidRepo]:
        """Scan a single repository, converting failures into an InvalidRepo."""
        if not self.directory_check(repo.resolved):
            return InvalidRepo(repo.input, repo.resolved, DIRECTORY_NOT_FOUND)

        try:
            worktrees = self.lister.list_worktrees(repo.resolved)
        except Exception as e:
            logger.debug(f"Could not list worktrees for {repo.resolved}: {e}")
            return InvalidRepo(repo.input, repo.resolved, str(e) or UNREADABLE_DIRECTORY)

        return RepoWorktrees(
            name=os.path.basename(repo.resolved) or repo.resolved,
            path=repo.resolved,
            worktrees=self.classify_worktrees(worktrees),
        )

    def _classify_one(self, worktree: Worktree) -> Worktree:
        """Classify a worktree, degrading it instead of raising."""
        try:
            return self.status_service.classify(worktree)
        except Exception as e:
            logger.warning(
                f"Could not classify worktree {worktree.path}: {e}", exc_info=self.config.debug
            )
            return worktree.with_status(WorktreeStatus.CLEAN, None, str(e) or type(e).__name__)

    def classify_worktrees(self, worktrees: List[Worktree]) -> List[Worktree]:
        """Classify worktrees concurrently, keeping their original order."""
        if not worktrees:
            return []

        if self.config.sequential or len(worktrees) == 1:
            return [self._classify_one(wt) for wt in worktrees]

        max_workers = get_optimal_worker_count(self.config.workers, len(worktrees))
        logger.debug(f"Using {max_workers} workers for {len(worktrees)} worktrees")

        results: List[Optional[Worktree]] = [None] * len(worktrees)
        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="worktree-status") as executor:
            future_to_index = {
                executor.submit(self._classify_one, wt): index
                for index, wt in enumerate(worktrees)
            }
            for future, index in future_to_index.items():
                results[index] = future.result()

        return results


def scan_worktrees(raw_repositories: str, config: Union[Config, dict, None] = None, tool=None) -> ScanResult:
    """Scan repositories with a one-off WorktreeScanner."""
    return WorktreeScanner(config, tool=tool).scan(raw_repositories)
