"""
Triage session history for phototriage.
"""

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .stats import TriageStats


class HistoryManager:
    """Manages the per-session log file and the global sessions log."""

    def __init__(self, dest_path: Path, root_dir: Path, dry_run: bool = False):
        self.dest_path = dest_path
        self.root_dir = root_dir
        self.dry_run = dry_run
        self.history_dir = self.root_dir / "history"
        self.sessions_audit_log = self.root_dir / "sessions.log"
        self._file_handler: Optional[logging.Handler] = None

        self._setup_session()

    def _setup_session(self) -> None:
        """Pick the session folder name, handling collisions with a counter."""
        timestamp = datetime.now().strftime("%Y-%m-%d")
        dest_name = self._sanitize_dest_name(self.dest_path)
        base_name = f"{timestamp}+{dest_name}"

        folder_name = base_name
        folder = self.history_dir / folder_name
        counter = 1
        while folder.exists() and any(folder.iterdir()):
            folder_name = f"{base_name}-{counter:02d}"
            folder = self.history_dir / folder_name
            counter += 1

        if not self.dry_run:
            folder.mkdir(parents=True, exist_ok=True)
        self.session_folder = folder
        self.session_folder_name = folder_name
        self.session_log = folder / "triage.log"

    def _sanitize_dest_name(self, dest_path: Path) -> str:
        """Convert destination path to safe folder name."""
        name = dest_path.name
        sanitized = re.sub(r'[^\w\-_]', '-', name)
        sanitized = re.sub(r'-+', '-', sanitized)
        return sanitized.strip('-') or "dest"

    def setup_session_logger(self, logger: logging.Logger) -> None:
        """Configure logger to also write to the session log file."""
        if self.dry_run:
            return

        file_handler = logging.FileHandler(self.session_log)
        file_handler.setLevel(logging.DEBUG)
        formatter = logging.Formatter(
            '%(asctime)s [%(name)s] %(levelname)s: %(message)s'
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        self._file_handler = file_handler

        # Ensure logger level allows DEBUG messages to reach the file handler
        logger.setLevel(logging.DEBUG)

    def close(self, logger: logging.Logger) -> None:
        """Detach and close the session log file handler."""
        if self._file_handler is not None:
            logger.removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None

    def log_session_summary(self, source: Path, dest: Path, stats: "TriageStats",
                            trash_dir: Optional[Path], failed: bool = False) -> None:
        """Append a summary line to the global sessions.log."""
        if self.dry_run:
            return

        self.root_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        if failed:
            status = "FAILED"
        elif stats.exited_early:
            status = "EXITED"
        else:
            status = "COMPLETE"
        trash_info = f" | Trash: {trash_dir}" if trash_dir else ""

        summary = (
            f"{timestamp} | {status} | "
            f"Source: {source} | Dest: {dest} | "
            f"Found: {stats.get_found()} | Moved: {stats.get_moved()} | "
            f"Copied: {stats.get_copied()} | Skipped: {stats.get_skipped()} | "
            f"Deleted: {stats.get_deleted()} | Not visited: {stats.get_unvisited()}"
            f"{trash_info} | History: {self.session_folder_name}\n"
        )

        with open(self.sessions_audit_log, 'a', encoding='utf-8') as f:
            f.write(summary)
