"""
Program settings, file extension constants and shared console/logger.
"""

import logging
from typing import Optional

from rich.console import Console

PROGRAM = "phototriage"

# File extension constants
PNG_EXTENSIONS = (".png",)
JPG_EXTENSIONS = (".jpg", ".jpeg")
PREVIEW_EXTENSIONS = PNG_EXTENSIONS + JPG_EXTENSIONS

# Never offered for triage
NUISANCE_FILENAMES = (
    ".ds_store", "thumbs.db", "desktop.ini"
)

TRASH_PREFIX = f"{PROGRAM}-"

_console: Optional[Console] = None


def get_console() -> Console:
    """Shared rich console for all program output."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def get_logger() -> logging.Logger:
    """Program-wide logger."""
    return logging.getLogger(PROGRAM)
