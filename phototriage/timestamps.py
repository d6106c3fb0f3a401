"""Modification dates and date-named destination folders."""

import os
from datetime import date, datetime
from pathlib import Path
from typing import Optional


def get_modification_date(file_path: Path) -> date:
    """Get the local modification date of a file, used in place of the date taken."""
    return datetime.fromtimestamp(file_path.stat().st_mtime).date()


def format_subdir(photo_date: date, subdir: str) -> str:
    """Render the subdirectory name for a date from a strftime pattern.

    For example ``"%Y %m %B"`` gives the 4-digit year, 2-digit month and full
    month name, e.g. ``"2023 07 July"``. The name is used exactly as rendered;
    it must be a single folder name inside the destination.
    """
    name = photo_date.strftime(subdir)
    if not name.strip():
        raise ValueError(f"Subdirectory format {subdir!r} produced an empty name")
    separators = {"/", os.sep, os.altsep} - {None}
    if any(sep in name for sep in separators) or name in (".", ".."):
        raise ValueError(f"Subdirectory format {subdir!r} must produce a single folder name, "
                         f"got {name!r}")
    return name


def effective_destination(dest: Path, photo_date: date, subdir: Optional[str] = None) -> Path:
    """Directory a photo goes to once the optional date subdirectory rule is applied."""
    if subdir is None:
        return dest
    return dest / format_subdir(photo_date, subdir)
