"""
Command-line interface for phototriage.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import Config
from .constants import PROGRAM, get_console, get_logger
from .core import PhotoTriage
from .errors import InvalidInputError
from .history import HistoryManager


def create_parser(config: Config) -> argparse.ArgumentParser:
    """Create argument parser with dynamic defaults from config."""
    last_source = config.get_last_source()
    last_dest = config.get_last_dest()
    subdir = config.get_subdir()

    source_help = "Source directory containing photos to triage"
    dest_help = "Destination directory for moved and copied photos"
    subdir_help = "Date format for destination subfolders, e.g. '%%Y %%m %%B'"
    preview_help = "Do not open photos in an image viewer"
    version_help = f"Display the version number of {PROGRAM} and exit"

    if last_source:
        source_help += f" (default: {last_source})"
    if last_dest:
        dest_help += f" (default: {last_dest})"
    if subdir:
        subdir_help += f" (default: {subdir.replace('%', '%%')})"
    if not config.get_preview():
        preview_help += " (currently disabled; use --preview to enable)"

    parser = argparse.ArgumentParser(
        description="Interactively move, copy, skip or delete photos one at a time",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  {PROGRAM} ~/Downloads/Camera ~/Pictures/Family
  {PROGRAM} ~/Downloads/Camera ~/Pictures/Family --subdir "%Y %m %B"
  {PROGRAM} --dry-run
        """
    )

    parser.add_argument(
        "source", nargs="?",
        help=source_help
    )
    parser.add_argument(
        "dest", nargs="?",
        help=dest_help
    )
    parser.add_argument(
        "--subdir", "-s", type=str, metavar="FORMAT",
        help=subdir_help
    )
    parser.add_argument(
        "--no-subdir", action="store_true",
        help="Put photos directly in the destination and forget the saved format"
    )
    parser.add_argument(
        "--no-preview", action="store_true",
        help=preview_help
    )
    parser.add_argument(
        "--preview", action="store_true",
        help="Re-enable photo previews"
    )
    parser.add_argument(
        "--yes", "-y", action="store_true",
        help="Auto-confirm processing for saved source/dest paths"
    )
    parser.add_argument(
        "--dry-run", "-n", action="store_true",
        help="Prompt for every photo without changing any files"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--version", "-V", action="store_true",
        help=version_help
    )

    return parser


def setup_logging(console: Console, verbose: bool = False) -> logging.Logger:
    """Route program log records to the console through rich."""
    logger = get_logger()
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    console_handler = RichHandler(console=console, rich_tracebacks=True, show_path=False)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(console_handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger


def show_processing_plan(source: Path, dest: Path, subdir: Optional[str], preview: bool,
                         dry_run: bool, console: Console) -> None:
    """Display the processing plan before execution."""
    console.print("\n[bold]Processing Plan:[/bold]")
    console.print(f"  Source:          [blue]{source}[/blue]")
    console.print(f"  Destination:     [blue]{dest}[/blue]")
    console.print(f"  Subdirectories:  [cyan]{subdir or 'None'}[/cyan]", highlight=False)
    console.print(f"  Preview:         [cyan]{'Yes' if preview else 'No'}[/cyan]")
    console.print(f"  Processing Mode: [cyan]{'DRY RUN' if dry_run else 'INTERACTIVE'}[/cyan]")
    console.print()


def confirm_processing(console: Console) -> bool:
    """Ask for confirmation when using saved configuration."""
    console.print("[yellow]Confirm processing plan with saved configuration.[/yellow]")

    try:
        response = console.input("Continue? [y/N]: ").strip().lower()
        return response in ['y', 'yes']
    except (EOFError, KeyboardInterrupt):
        console.print("\n[red]Operation cancelled[/red]")
        return False


def main(config_path: Optional[Path] = None) -> int:
    """Main entry point.

    Args:
        config_path: Optional path to config file (for testing)
    """
    config = Config(config_path=config_path)
    parser = create_parser(config)
    args = parser.parse_args()

    using_saved_config = args.source is None and args.dest is None

    if args.version:
        from . import __version__, __copyright__
        if args.verbose:
            print(f"{PROGRAM} version {__version__} {__copyright__}")
            print(f"Config:  {config.config_path}")
            return 0
        print(__version__)
        return 0

    source_path = args.source or config.get_last_source()
    dest_path = args.dest or config.get_last_dest()

    if not source_path or not dest_path:
        parser.error("Source and destination directories are required")

    source = Path(source_path).expanduser().resolve()
    dest = Path(dest_path).expanduser().resolve()

    if not source.exists():
        print(f"Error: Source directory does not exist: {source}")
        return 1

    if not source.is_dir():
        print(f"Error: Source is not a directory: {source}")
        return 1

    if source == dest:
        print(f"Error: Source and destination are the same folder: {source}")
        return 1

    if args.subdir and args.no_subdir:
        parser.error("--subdir and --no-subdir cannot be combined")
    if args.preview and args.no_preview:
        parser.error("--preview and --no-preview cannot be combined")

    config.update_paths(str(source), str(dest))

    if args.no_subdir:
        config.update_subdir(None)
    elif args.subdir:
        config.update_subdir(args.subdir)
    subdir = config.get_subdir()

    if args.no_preview:
        config.update_preview(False)
    elif args.preview:
        config.update_preview(True)
    preview = config.get_preview()

    console = get_console()
    logger = setup_logging(console, verbose=args.verbose)

    show_processing_plan(source, dest, subdir, preview, args.dry_run, console)

    if using_saved_config and not args.yes:
        if not confirm_processing(console):
            return 0

    history_manager = HistoryManager(dest_path=dest, root_dir=config.program_root,
                                     dry_run=args.dry_run)
    history_manager.setup_session_logger(logger)

    triage = PhotoTriage(
        source=source,
        dest=dest,
        subdir=subdir,
        dry_run=args.dry_run,
        preview=preview,
        history_manager=history_manager,
    )

    try:
        triage.run()
        console.print()
        triage.print_summary()
        console.print("\n[green]✓ Triage finished[/green]")
        return 0

    except InvalidInputError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1
    except KeyboardInterrupt:
        console.print("\n[red]Operation cancelled by user[/red]")
        triage.print_summary()
        return 1
    except Exception as e:
        logger.debug("Triage failed", exc_info=True)
        console.print(f"\n[red]Fatal error: {e}[/red]")
        # Files already deleted this session are only findable through the summary
        triage.print_summary()
        return 1
    finally:
        history_manager.close(logger)


if __name__ == "__main__":
    sys.exit(main())
