"""Display service for worktree scan results"""
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from git_worktree_keeper.constants import CLI_COLORS, COLUMNS, LEGEND_TEXT
from git_worktree_keeper.formatters import (
    format_status_label,
    format_worktree_title,
    get_status_style_type,
)
from git_worktree_keeper.models.repository import RepoWorktrees, ScanResult
from git_worktree_keeper.models.worktree import WorktreeStatus
from git_worktree_keeper.logging_config import get_logger

logger = get_logger(__name__)


class DisplayService:
    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        self.console = console or Console()
        self.verbose = verbose

    def build_repo_table(self, repo: RepoWorktrees) -> Table:
        """Build a table with one row per worktree of a repository."""
        count = len(repo.worktrees)
        table = Table(
            title=f"[bold]{repo.name}[/bold]",
            caption=f"{count} worktree{'s' if count != 1 else ''} · {repo.path}",
            title_justify="left",
            caption_justify="left",
        )
        for col in COLUMNS:
            table.add_column(col.label, width=col.width or None, overflow="fold")

        for worktree in repo.worktrees:
            style = CLI_COLORS.get(get_status_style_type(worktree))
            status = Text(format_status_label(worktree), style=style or "")
            title = format_worktree_title(worktree)
            if worktree.detached:
                title = f"[dim]{title}[/dim]"
            table.add_row(title, status, worktree.path)

        return table

    def display_invalid_repos(self, result: ScanResult) -> None:
        """Show repositories that could not be scanned."""
        if not result.invalid_repos:
            return

        table = Table(title="[bold yellow]Invalid repositories[/bold yellow]", title_justify="left")
        table.add_column("Input")
        table.add_column("Problem", overflow="fold")
        for invalid in result.invalid_repos:
            table.add_row(invalid.input, f"{invalid.reason}: {invalid.resolved}")
        self.console.print(table)

    def display_scan_result(self, result: ScanResult, show_summary: bool = False) -> None:
        """Display every repository table, then invalid repositories."""
        if not result.repos and not result.invalid_repos:
            self.console.print("[yellow]No repositories configured.[/yellow]")
            return

        if not result.repos:
            self.console.print("[yellow]No worktrees found.[/yellow]")

        for repo in result.repos:
            self.console.print(self.build_repo_table(repo))
            self.console.print()

        self.display_invalid_repos(result)

        if show_summary:
            self.display_summary(result)

    def display_summary(self, result: ScanResult) -> None:
        """Print the legend and per-status totals."""
        worktrees = [wt for repo in result.repos for wt in repo.worktrees]
        self.console.print(LEGEND_TEXT)
        self.console.print("Summary:")
        self.console.print(f"Repositories: {len(result.repos)}")
        self.console.print(f"Worktrees: {len(worktrees)}")
        for status in WorktreeStatus:
            count = sum(1 for wt in worktrees if wt.status == status)
            self.console.print(f"{status.value.capitalize()}: {count}")
        if result.invalid_repos:
            self.console.print(f"Invalid repositories: {len(result.invalid_repos)}")

    def display_json(self, result: ScanResult) -> None:
        """Print the scan result as JSON."""
        self.console.print_json(data=result.to_dict())
