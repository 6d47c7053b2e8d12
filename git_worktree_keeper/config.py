"""Configuration handling for git-worktree-keeper"""

import os
from dataclasses import dataclass
from typing import List, Optional

from git_worktree_keeper.exceptions import ConfigurationError

REPOSITORIES_ENV_VAR = "GIT_WORKTREE_KEEPER_REPOS"


@dataclass
class Config:
    """Configuration for git-worktree-keeper with validation."""

    # Newline- or comma-separated repository paths
    repositories: str = ""

    # Execution modes
    verbose: bool = False
    debug: bool = False
    sequential: bool = False  # Classify worktrees one at a time
    workers: Optional[int] = None  # Number of parallel workers (None = auto-detect)

    # Output options
    output_format: str = "table"  # table, json
    search: str = ""
    strict: bool = False  # Non-zero exit when nothing could be scanned

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_repositories()
        self._validate_workers()
        self._validate_output_format()

    def _validate_repositories(self):
        """Validate repositories is a string."""
        if not isinstance(self.repositories, str):
            raise ConfigurationError(
                f"repositories must be a string, got {type(self.repositories).__name__}"
            )

    def _validate_workers(self):
        """Validate workers is positive when given."""
        if self.workers is not None and self.workers <= 0:
            raise ConfigurationError(f"workers must be positive, got {self.workers}")

    def _validate_output_format(self):
        """Validate output_format is one of allowed values."""
        allowed = ["table", "json"]
        if self.output_format not in allowed:
            raise ConfigurationError(
                f"output_format must be one of {allowed}, got '{self.output_format}'"
            )

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "repositories": self.repositories,
            "verbose": self.verbose,
            "debug": self.debug,
            "sequential": self.sequential,
            "workers": self.workers,
            "output_format": self.output_format,
            "search": self.search,
            "strict": self.strict,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {
            "repositories",
            "verbose",
            "debug",
            "sequential",
            "workers",
            "output_format",
            "search",
            "strict",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)


def repositories_from_sources(cli_values: Optional[List[str]] = None, environ=None) -> str:
    """Combine command-line paths, falling back to the environment variable.

    Each command-line value may itself hold several comma- or newline-separated
    entries; they are joined with newlines and split later by the path resolver.
    """
    if cli_values:
        return "\n".join(cli_values)
    environ = os.environ if environ is None else environ
    return environ.get(REPOSITORIES_ENV_VAR, "")
