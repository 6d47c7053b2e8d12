"""Repository scan data models."""

from dataclasses import dataclass, field
from typing import List

from .worktree import Worktree


@dataclass(frozen=True)
class RepoInput:
    """A configured repository entry and its resolved absolute path."""

    input: str
    resolved: str


@dataclass(frozen=True)
class InvalidRepo:
    """A configured repository that could not be scanned."""

    input: str
    resolved: str
    reason: str

    def to_dict(self) -> dict:
        return {"input": self.input, "resolved": self.resolved, "reason": self.reason}


@dataclass
class RepoWorktrees:
    """All worktrees of one successfully scanned repository."""

    name: str
    path: str
    worktrees: List[Worktree] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "path": self.path,
            "worktrees": [wt.to_dict() for wt in self.worktrees],
        }


@dataclass
class ScanResult:
    """Result of scanning every configured repository."""

    repos: List[RepoWorktrees] = field(default_factory=list)
    invalid_repos: List[InvalidRepo] = field(default_factory=list)

    @property
    def worktree_count(self) -> int:
        return sum(len(repo.worktrees) for repo in self.repos)

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary."""
        return {
            "repos": [repo.to_dict() for repo in self.repos],
            "invalidRepos": [invalid.to_dict() for invalid in self.invalid_repos],
        }
