"""Command-line argument parsing for git-worktree-keeper."""

import argparse

from git_worktree_keeper.__version__ import __version__
from git_worktree_keeper.config import REPOSITORIES_ENV_VAR


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-worktree-keeper",
        description="Show the git worktrees of several repositories with their branch and sync status",
        epilog=f"Repositories can also be given in the {REPOSITORIES_ENV_VAR} environment variable "
        "(newline- or comma-separated, ~ is expanded).",
    )
    parser.add_argument(
        "repos",
        nargs="*",
        metavar="PATH",
        help="Repository paths to scan (each may hold comma-separated paths)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"git-worktree-keeper {__version__}")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument(
        "-s", "--search",
        default="",
        metavar="TEXT",
        help="Only show repositories or worktrees matching TEXT (name, path, branch or status)",
    )
    parser.add_argument(
        "--json", dest="output_format", action="store_const", const="json", default="table",
        help="Print the scan result as JSON",
    )
    parser.add_argument(
        "--summary", action="store_true", help="Show a legend and status totals after the tables"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 2 when no configured repository could be scanned",
    )
    parser.add_argument(
        "--workers",
        type=int,
        metavar="N",
        help="Number of parallel workers for status queries (default: auto-detect)",
    )
    parser.add_argument(
        "--sequential",
        action="store_true",
        help="Query worktree status one at a time",
    )
    return parser


def parse_args(argv=None):
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)
