"""
phototriage - Interactively sort photos into a destination folder.

Each photo in a source folder is previewed and then moved, copied, skipped or
deleted on request, optionally into date-named subfolders. Deleted photos are
kept in a temporary folder rather than erased.
"""

__version__ = "1.0.0"
__copyright__ = "MIT License"


# Public API
from .actions import Action, ActionPrompt
from .cli import main
from .config import Config
from .core import PhotoTriage, sort_photos
from .errors import InvalidInputError, PhototriageError
from .file_operations import FileOperations
from .preview import PhotoPreviewer, PreviewFormat
from .reporting import ConsoleReporter, RecordingReporter, TriageEvent, TriageReporter

__all__ = [ "main", "sort_photos", "PhotoTriage", "Action", "ActionPrompt", "Config",
            "InvalidInputError", "PhototriageError", "FileOperations", "PhotoPreviewer",
            "PreviewFormat", "ConsoleReporter", "RecordingReporter", "TriageEvent",
            "TriageReporter" ]
