"""
Progress reporting for the triage loop.

The loop never prints directly; it emits TriageEvent objects to a reporter,
so callers decide where notices end up.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from .constants import get_console, get_logger


class EventKind(Enum):
    CREATED_DIRECTORY = "created_directory"
    FOUND_FILES = "found_files"
    PHOTO_DATE = "photo_date"
    DESTINATION = "destination"
    ACTION = "action"
    EXITING = "exiting"
    PREVIEW_UNSUPPORTED = "preview_unsupported"


@dataclass
class TriageEvent:
    """A single human-readable progress notice."""
    kind: EventKind
    message: str
    path: Optional[Path] = None

    @property
    def is_warning(self) -> bool:
        return self.kind is EventKind.PREVIEW_UNSUPPORTED


class TriageReporter:
    """Receives events from the triage loop. Subclasses decide how to show them."""

    def emit(self, event: TriageEvent) -> None:
        raise NotImplementedError


class ConsoleReporter(TriageReporter):
    """Print events to the rich console and mirror them to the program log."""

    STYLES = {
        EventKind.CREATED_DIRECTORY: "green",
        EventKind.FOUND_FILES: "bold",
        EventKind.DESTINATION: "blue",
        EventKind.ACTION: "cyan",
        EventKind.EXITING: "yellow",
    }

    def __init__(self, console: Optional[Console] = None):
        self.console = console or get_console()
        self.logger = get_logger()

    def emit(self, event: TriageEvent) -> None:
        # Warnings reach the console through the log handlers
        if event.is_warning:
            self.logger.warning(event.message)
            return

        text = event.message
        if event.kind in (EventKind.CREATED_DIRECTORY, EventKind.FOUND_FILES):
            text = f"• {text}"
        self.console.print(text, style=self.STYLES.get(event.kind), markup=False, highlight=False)
        self.logger.info(event.message)


class RecordingReporter(TriageReporter):
    """Keep every event in memory, for scripted runs and tests."""

    def __init__(self):
        self.events: List[TriageEvent] = []

    def emit(self, event: TriageEvent) -> None:
        self.events.append(event)

    def of_kind(self, kind: EventKind) -> List[TriageEvent]:
        return [event for event in self.events if event.kind is kind]

    @property
    def messages(self) -> List[str]:
        return [event.message for event in self.events]
