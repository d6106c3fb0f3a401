"""
Core interactive photo triage.
"""

from datetime import date
from pathlib import Path
from typing import List, Optional, Union

from rich.table import Table

from .actions import Action, ActionPrompt, PromptFunc
from .constants import NUISANCE_FILENAMES, get_console, get_logger
from .errors import InvalidInputError
from .file_operations import FileOperations
from .history import HistoryManager
from .preview import PhotoPreviewer, PreviewFormat
from .reporting import ConsoleReporter, EventKind, TriageEvent, TriageReporter
from .stats import TriageStats
from .timestamps import effective_destination, format_subdir, get_modification_date


class PhotoTriage:
    """Walk a source folder and let the user decide the fate of each photo."""

    def __init__(self, source: Union[str, Path], dest: Union[str, Path],
                 subdir: Optional[str] = None, prompt: Optional[PromptFunc] = None,
                 previewer: Optional[PhotoPreviewer] = None,
                 reporter: Optional[TriageReporter] = None,
                 dry_run: bool = False, preview: bool = True,
                 trash_root: Optional[Path] = None,
                 history_manager: Optional[HistoryManager] = None):
        self.source = Path(source).expanduser()
        self.dest = Path(dest).expanduser()
        self.subdir = subdir
        self.dry_run = dry_run
        self.preview = preview
        self.prompt = prompt or ActionPrompt()
        self.previewer = previewer or PhotoPreviewer()
        self.reporter = reporter or ConsoleReporter()
        self.history_manager = history_manager
        self.file_ops = FileOperations(dry_run=dry_run, trash_root=trash_root)
        self.stats = TriageStats()
        self.console = get_console()
        self.logger = get_logger()

    @property
    def trash_dir(self) -> Optional[Path]:
        """Where deleted photos were relocated, if any were."""
        return self.file_ops.trash_dir

    def _report(self, kind: EventKind, message: str, path: Optional[Path] = None) -> None:
        self.reporter.emit(TriageEvent(kind, message, path))

    def validate_source(self) -> None:
        if not self.source.exists():
            raise InvalidInputError(f"Source directory does not exist: {self.source}")
        if not self.source.is_dir():
            raise InvalidInputError(f"Source is not a directory: {self.source}")

    def find_photos(self) -> List[Path]:
        """List files directly inside the source folder, in name order."""
        return sorted(
            p for p in self.source.iterdir()
            if p.is_file() and p.name.lower() not in NUISANCE_FILENAMES
        )

    def run(self) -> Path:
        """Triage every photo in the source folder. Returns the destination path."""
        self.validate_source()
        if self.subdir is not None:
            format_subdir(date.today(), self.subdir)

        self.logger.info(f"Starting triage session: {self.source} -> {self.dest}")
        self.logger.info(f"Mode: {'DRY RUN' if self.dry_run else 'LIVE'}")

        if self.file_ops.ensure_directory(self.dest):
            self._report(EventKind.CREATED_DIRECTORY, f"Created directory {self.dest}", self.dest)

        photos = self.find_photos()
        self.stats.set_found(len(photos))
        self._report(EventKind.FOUND_FILES, f"Found {len(photos)} files in {self.source}", self.source)

        completed = False
        try:
            for photo in photos:
                action = self.triage_photo(photo)
                if action is Action.EXIT:
                    self._report(EventKind.EXITING, "Exiting...")
                    break
            completed = True
        finally:
            if self.history_manager is not None:
                self.history_manager.log_session_summary(self.source, self.dest, self.stats,
                                                         self.trash_dir, failed=not completed)
        return self.dest

    def preview_photo(self, photo: Path) -> PreviewFormat:
        preview_format = PreviewFormat.from_path(photo)
        if preview_format is PreviewFormat.UNSUPPORTED:
            ext = photo.suffix.lower().lstrip(".")
            self._report(EventKind.PREVIEW_UNSUPPORTED,
                         f"Don't know how to read file extension {ext}", photo)
        elif preview_format in (PreviewFormat.PNG, PreviewFormat.JPEG):
            if self.preview:
                self.previewer.show(photo, preview_format)
        return preview_format

    def triage_photo(self, photo: Path) -> Action:
        """Preview one photo, ask what to do with it and apply the answer."""
        self.preview_photo(photo)

        photo_date = get_modification_date(photo)
        self._report(EventKind.PHOTO_DATE, f"{photo.name} created on {photo_date.isoformat()}", photo)

        destination = effective_destination(self.dest, photo_date, self.subdir)
        if destination != self.dest:
            self.file_ops.ensure_directory(destination)
        self._report(EventKind.DESTINATION, f"Destination directory: {destination}", destination)

        action = self.prompt()
        self.apply_action(action, photo, destination)
        return action

    def apply_action(self, action: Action, photo: Path, destination: Path) -> Optional[Path]:
        """Apply a chosen action. Returns where the photo ended up, if it went anywhere."""
        if action is Action.EXIT:
            self.stats.record_action(action)
            return None

        file_size = photo.stat().st_size
        result = None
        if action is Action.MOVE:
            self._report(EventKind.ACTION, "Moving file", photo)
            result = self.file_ops.move_file(photo, destination)
        elif action is Action.COPY:
            self._report(EventKind.ACTION, "Copying file", photo)
            result = self.file_ops.copy_file(photo, destination)
        elif action is Action.SKIP:
            self._report(EventKind.ACTION, "Skipping file", photo)
        elif action is Action.DELETE:
            self._report(EventKind.ACTION, "Deleting file", photo)
            result = self.file_ops.soft_delete(photo)
        else:
            raise ValueError(f"Unknown action: {action!r}")

        self.stats.record_action(action, file_size)
        return result

    def print_summary(self) -> None:
        """Print triage summary."""
        table = Table(title="Triage Summary")
        table.add_column("Category", style="cyan")
        table.add_column("Count", style="green")

        table.add_row("Found", str(self.stats.get_found()))
        table.add_row("Moved", str(self.stats.get_moved()))
        table.add_row("Copied", str(self.stats.get_copied()))
        table.add_row("Skipped", str(self.stats.get_skipped()))
        table.add_row("Deleted", str(self.stats.get_deleted()))
        table.add_row("Not Visited", str(self.stats.get_unvisited()))

        size_mb = self.stats.get_total_size_mb()
        if size_mb > 1024:
            size_str = f"{size_mb/1024:.1f} GB"
        else:
            size_str = f"{size_mb:.1f} MB"
        table.add_row("Total Size", size_str)

        self.console.print(table)

        if self.trash_dir is not None:
            self.console.print(f"\n[yellow]Deleted files were moved to: {self.trash_dir}[/yellow]")


def sort_photos(source: Union[str, Path], dest: Union[str, Path], subdir: Optional[str] = None,
                *, prompt: Optional[PromptFunc] = None,
                previewer: Optional[PhotoPreviewer] = None,
                reporter: Optional[TriageReporter] = None,
                dry_run: bool = False, preview: bool = True) -> Path:
    """Sort photos by date, one decision per file.

    For each photo in ``source`` you can move it, copy it, skip it or delete it.
    Deleted photos are relocated to a temporary directory, not erased.

    Args:
        source: Directory that contains the photo files; must exist.
        dest: Directory to move or copy photos to. Created if it doesn't exist.
        subdir: Optional strftime pattern for a dated subdirectory built from
            each photo's modification date, e.g. ``"%Y %m %B"``.
        prompt: Callable returning the chosen Action (defaults to a text menu).
        previewer: Image previewer (defaults to Pillow).
        reporter: Receives progress notices (defaults to the console).
        dry_run: Prompt as usual but leave the filesystem alone.
        preview: Set False to never open photos.

    Returns:
        The destination directory path.

    Raises:
        InvalidInputError: If ``source`` is not an existing directory.
    """
    triage = PhotoTriage(source, dest, subdir=subdir, prompt=prompt, previewer=previewer,
                         reporter=reporter, dry_run=dry_run, preview=preview)
    return triage.run()
