"""Pytest fixtures for git-worktree-keeper tests"""
import tempfile
from pathlib import Path

import git
import pytest

from helpers import FakeGitTool, commit_file


def _configure_user(repo: git.Repo) -> None:
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        # git reports worktree paths with symlinks resolved
        yield Path(tmpdir).resolve()


@pytest.fixture
def mock_config():
    """Create a mock configuration dictionary."""
    return {
        'verbose': False,
        'debug': False,
        'sequential': False,
        'workers': None,
    }


@pytest.fixture
def fake_tool():
    return FakeGitTool()


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with one commit on main."""
    repo_path = temp_dir / "origin_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    _configure_user(repo)
    commit_file(repo, "README.md", "# Test Repository\n", "Initial commit")

    # Rename master to main if needed
    repo.git.branch('-M', 'main')

    yield repo

    repo.close()


@pytest.fixture
def cloned_repo(git_repo, temp_dir):
    """Clone of git_repo whose main branch tracks origin/main."""
    clone = git.Repo.clone_from(git_repo.working_dir, temp_dir / "clone")
    _configure_user(clone)

    yield clone

    clone.close()


@pytest.fixture
def repo_with_worktrees(cloned_repo, temp_dir):
    """Clone with a feature worktree (no upstream) and a detached worktree."""
    feature_path = temp_dir / "clone-feature"
    detached_path = temp_dir / "clone-detached"
    cloned_repo.git.worktree("add", "-b", "feature/x", str(feature_path))
    cloned_repo.git.worktree("add", "--detach", str(detached_path))

    yield cloned_repo, feature_path, detached_path
