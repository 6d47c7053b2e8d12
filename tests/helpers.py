"""Test doubles and helpers shared by the test modules."""

from pathlib import Path

from git_worktree_keeper.exceptions import GitOperationError


class FakeGitTool:
    """In-memory VersionControlTool.

    Values may be exceptions, which are raised instead of returned. Paths with
    no divergence entry behave like branches without an upstream.
    """

    def __init__(self, listings=None, dirty=None, divergence=None):
        self.listings = listings or {}
        self.dirty = dirty or {}
        self.divergence = divergence or {}
        self.listed = []

    @staticmethod
    def _value(value):
        if isinstance(value, BaseException):
            raise value
        return value

    def list_worktrees_output(self, repo_path):
        self.listed.append(repo_path)
        if repo_path not in self.listings:
            raise GitOperationError("worktree list", repo_path, "(exit 128) fatal: not a git repository")
        return self._value(self.listings[repo_path])

    def is_dirty(self, worktree_path):
        return self._value(self.dirty.get(worktree_path, False))

    def get_divergence(self, worktree_path):
        if worktree_path not in self.divergence:
            raise GitOperationError("rev-list", worktree_path, "(exit 128) fatal: no upstream configured")
        return self._value(self.divergence[worktree_path])


def porcelain(*groups):
    """Build ``git worktree list --porcelain`` output from (path, branch) pairs.

    A branch of None produces a detached group.
    """
    lines = []
    for path, branch in groups:
        lines.append(f"worktree {path}")
        lines.append("HEAD 0123456789abcdef0123456789abcdef01234567")
        if branch is None:
            lines.append("detached")
        else:
            lines.append(f"branch refs/heads/{branch}")
        lines.append("")
    return "\n".join(lines)


def commit_file(repo, name: str, content: str, message: str) -> None:
    """Write a file in the repo's working tree and commit it."""
    path = Path(repo.working_dir) / name
    path.write_text(content)
    repo.index.add([name])
    repo.index.commit(message)
