"""Tests for repository path parsing, resolution and validation"""
import os

import pytest

from git_worktree_keeper.services.path_resolver import (
    is_directory,
    parse_path_inputs,
    resolve_configured_path,
    resolve_repositories,
)


class TestParsePathInputs:
    """Test splitting of the configured repositories string."""

    def test_splits_on_newlines_and_commas(self):
        assert parse_path_inputs("a\nb,c") == ["a", "b", "c"]

    def test_trims_and_drops_empty_entries(self):
        assert parse_path_inputs("  a , ,\n\n  b  \n") == ["a", "b"]

    def test_deduplicates_preserving_first_seen_order(self):
        assert parse_path_inputs("b,a,b\na") == ["b", "a"]

    def test_empty_input(self):
        assert parse_path_inputs("") == []
        assert parse_path_inputs(" ,\n ") == []

    def test_other_delimiters_are_not_separators(self):
        assert parse_path_inputs("a;b c") == ["a;b c"]


class TestResolveConfiguredPath:
    """Test home expansion and absolute resolution."""

    @pytest.fixture(autouse=True)
    def fake_home(self, temp_dir, monkeypatch):
        home = temp_dir / "home"
        home.mkdir()
        monkeypatch.setenv("HOME", str(home))
        return home

    def test_tilde_is_home(self, fake_home):
        assert resolve_configured_path("~") == str(fake_home)

    def test_tilde_slash_joins_home(self, fake_home):
        assert resolve_configured_path("~/src/proj") == str(fake_home / "src" / "proj")

    def test_tilde_user_form_is_treated_as_relative(self, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)
        assert resolve_configured_path("~other") == str(temp_dir / "~other")

    def test_relative_path_uses_working_directory(self, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)
        assert resolve_configured_path("proj") == str(temp_dir / "proj")

    def test_path_is_normalised_without_existing(self, temp_dir):
        raw = f"{temp_dir}/a/../missing/./repo/"
        assert resolve_configured_path(raw) == str(temp_dir / "missing" / "repo")


class TestResolveRepositories:
    """Test deduplication by resolved path."""

    def test_two_spellings_of_same_directory_collapse(self, temp_dir, monkeypatch):
        monkeypatch.setenv("HOME", str(temp_dir))
        raw = f"~/proj\n{temp_dir}/proj, {temp_dir}/proj/"

        repos = resolve_repositories(raw)

        assert len(repos) == 1
        assert repos[0].input == "~/proj"
        assert repos[0].resolved == str(temp_dir / "proj")

    def test_keeps_order_of_distinct_paths(self, temp_dir):
        raw = f"{temp_dir}/b,{temp_dir}/a"
        repos = resolve_repositories(raw)
        assert [r.resolved for r in repos] == [str(temp_dir / "b"), str(temp_dir / "a")]
        assert [r.input for r in repos] == [f"{temp_dir}/b", f"{temp_dir}/a"]


class TestIsDirectory:
    """Test directory validation."""

    def test_existing_directory(self, temp_dir):
        assert is_directory(str(temp_dir)) is True

    def test_regular_file(self, temp_dir):
        path = temp_dir / "file.txt"
        path.write_text("content")
        assert is_directory(str(path)) is False

    def test_missing_path(self, temp_dir):
        assert is_directory(str(temp_dir / "missing")) is False

    def test_invalid_path_is_not_an_error(self):
        assert is_directory("bad\0path") is False

    def test_name_too_long_is_not_an_error(self, temp_dir):
        assert is_directory(str(temp_dir / ("x" * 5000))) is False

    @pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="needs POSIX permissions")
    def test_permission_denied_is_not_an_error(self, temp_dir):
        locked = temp_dir / "locked"
        locked.mkdir()
        (locked / "inner").mkdir()
        locked.chmod(0)
        try:
            assert is_directory(str(locked / "inner")) is False
        finally:
            locked.chmod(0o755)
