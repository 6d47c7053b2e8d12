"""Text search over scan results."""

from typing import List

from git_worktree_keeper.models.repository import RepoWorktrees
from git_worktree_keeper.models.worktree import Worktree


def worktree_matches(worktree: Worktree, query: str) -> bool:
    """Case-insensitive substring match on path, branch or status."""
    return (
        query in worktree.path.lower()
        or (worktree.branch is not None and query in worktree.branch.lower())
        or query in worktree.status.value
    )


def filter_repos(repos: List[RepoWorktrees], query: str) -> List[RepoWorktrees]:
    """Filter repositories and their worktrees by a search query.

    A repository whose name matches is kept whole. Otherwise only its matching
    worktrees are kept, and the repository is dropped if none match.
    """
    query = (query or "").strip().lower()
    if not query:
        return list(repos)

    filtered = []
    for repo in repos:
        if query in repo.name.lower():
            filtered.append(repo)
            continue

        matches = [wt for wt in repo.worktrees if worktree_matches(wt, query)]
        if matches:
            filtered.append(RepoWorktrees(name=repo.name, path=repo.path, worktrees=matches))

    return filtered
