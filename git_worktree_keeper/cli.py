"""Command-line interface for git-worktree-keeper"""

import locale
import sys

from rich.console import Console

from .args import parse_args
from .config import Config, repositories_from_sources
from .logging_config import get_logger, setup_logging
from .services.display_service import DisplayService
from .services.scanner import WorktreeScanner
from .services.search import filter_repos
from .utils.threading import get_threading_info

console = Console()
logger = get_logger(__name__)

EXIT_NOTHING_SCANNED = 2


def main(argv=None) -> int:
    """Main entry point for the application."""
    parsed_args = None
    try:
        parsed_args = parse_args(argv)

        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        try:
            # Repository names are sorted with the user's collation rules
            locale.setlocale(locale.LC_COLLATE, "")
        except locale.Error as e:
            logger.debug(f"Using default collation: {e}")

        config = Config(
            repositories=repositories_from_sources(parsed_args.repos),
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
            sequential=parsed_args.sequential,
            workers=parsed_args.workers,
            output_format=parsed_args.output_format,
            search=parsed_args.search,
            strict=parsed_args.strict,
        )

        if config.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            threading_info = get_threading_info()
            console.print("[yellow]Threading Information:[/yellow]")
            console.print(f"  Python version: {threading_info['python_version']}")
            console.print(f"  Threading mode: {threading_info['mode']}")
            console.print(f"  CPU count: {threading_info['cpu_count']}")
            console.print(f"  Optimal workers: {threading_info['optimal_workers']}")
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        result = WorktreeScanner(config).scan()
        nothing_scanned = not result.repos and bool(result.invalid_repos)
        result.repos = filter_repos(result.repos, config.search)

        display = DisplayService(console, verbose=config.verbose)
        if config.output_format == "json":
            display.display_json(result)
        else:
            display.display_scan_result(result, show_summary=parsed_args.summary)

        if config.strict and nothing_scanned:
            return EXIT_NOTHING_SCANNED
        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if parsed_args is not None and parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
