"""Tests for DisplayService"""
import io
import json

import pytest
from rich.console import Console

from git_worktree_keeper.models.repository import InvalidRepo, RepoWorktrees, ScanResult
from git_worktree_keeper.models.worktree import SyncInfo, Worktree, WorktreeStatus
from git_worktree_keeper.services.display_service import DisplayService


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def display(output):
    return DisplayService(Console(file=output, width=200, color_system=None))


@pytest.fixture
def scan_result():
    return ScanResult(
        repos=[
            RepoWorktrees("proj", "/src/proj", [
                Worktree("/src/proj", branch="main", status=WorktreeStatus.CLEAN,
                         sync=SyncInfo(ahead=2, behind=0)),
                Worktree("/src/proj-wt", detached=True),
            ])
        ],
        invalid_repos=[InvalidRepo("~/gone", "/home/u/gone", "Directory not found")],
    )


class TestDisplayScanResult:
    def test_repository_table(self, display, output, scan_result):
        display.display_scan_result(scan_result)
        text = output.getvalue()

        assert "proj" in text
        assert "2 worktrees · /src/proj" in text
        assert "Ahead (↑2)" in text
        assert "Detached" in text
        assert "/src/proj-wt" in text

    def test_invalid_repositories_section(self, display, output, scan_result):
        display.display_scan_result(scan_result)
        text = output.getvalue()

        assert "Invalid repositories" in text
        assert "~/gone" in text
        assert "Directory not found: /home/u/gone" in text

    def test_nothing_configured(self, display, output):
        display.display_scan_result(ScanResult())
        assert "No repositories configured" in output.getvalue()

    def test_summary(self, display, output, scan_result):
        display.display_scan_result(scan_result, show_summary=True)
        text = output.getvalue()

        assert "Worktrees: 2" in text
        assert "Clean: 2" in text
        assert "Invalid repositories: 1" in text


def test_display_json(display, output, scan_result):
    display.display_json(scan_result)
    data = json.loads(output.getvalue())

    assert data == scan_result.to_dict()
