"""Version information for git-worktree-keeper."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("git-worktree-keeper")
except PackageNotFoundError:
    # Running from a source checkout without an installed distribution
    __version__ = "0.0.0+unknown"
