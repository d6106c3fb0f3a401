"""
Filesystem operations applied to triaged photos.
"""

import shutil
import tempfile
from pathlib import Path
from typing import Optional

from .constants import TRASH_PREFIX, get_logger


class FileOperations:
    """Move, copy and soft-delete files with dry-run support.

    Failures are not handled here; they propagate to the caller.
    """

    def __init__(self, dry_run: bool = False, trash_root: Optional[Path] = None):
        self.dry_run = dry_run
        self.trash_root = trash_root
        self._trash_dir: Optional[Path] = None
        self.logger = get_logger()

    @property
    def trash_dir(self) -> Optional[Path]:
        """Holding directory for deleted files, or None until the first delete."""
        return self._trash_dir

    def ensure_directory(self, directory: Path) -> bool:
        """Create directory and parents if needed. Returns True if it was created."""
        if self.dry_run or directory.exists():
            return False
        directory.mkdir(parents=True, exist_ok=True)
        self.logger.debug(f"Created directory {directory}")
        return True

    def move_file(self, source: Path, dest_dir: Path) -> Path:
        """Move a file into dest_dir under its original name."""
        dest = self._target_path(source, dest_dir)
        if self.dry_run:
            return dest

        shutil.move(str(source), str(dest))
        self.logger.info(f"Moved {source} -> {dest}")
        return dest

    def copy_file(self, source: Path, dest_dir: Path) -> Path:
        """Copy a file into dest_dir under its original name, keeping metadata."""
        dest = self._target_path(source, dest_dir)
        if self.dry_run:
            return dest

        shutil.copy2(str(source), str(dest))
        self.logger.info(f"Copied {source} -> {dest}")
        return dest

    def soft_delete(self, source: Path) -> Path:
        """Relocate a file to the temporary trash directory instead of erasing it."""
        if self.dry_run:
            return Path(tempfile.gettempdir()) / source.name

        trash = self._ensure_trash_dir()
        dest = self._target_path(source, trash)
        shutil.move(str(source), str(dest))
        self.logger.info(f"Deleted {source} -> {dest}")
        return dest

    def _ensure_trash_dir(self) -> Path:
        if self._trash_dir is None:
            root = str(self.trash_root) if self.trash_root else None
            self._trash_dir = Path(tempfile.mkdtemp(prefix=TRASH_PREFIX, dir=root))
            self.logger.debug(f"Created trash directory {self._trash_dir}")
        return self._trash_dir

    @staticmethod
    def _target_path(source: Path, dest_dir: Path) -> Path:
        dest = dest_dir / source.name
        if dest.exists():
            raise FileExistsError(f"Destination file already exists: {dest}")
        return dest
