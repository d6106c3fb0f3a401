"""
Statistics tracking for triage sessions.
"""

from typing import Dict

from .actions import Action


class TriageStats:
    """Counts what happened to the photos of one triage run."""

    _COUNTERS = {
        Action.MOVE: 'moved',
        Action.COPY: 'copied',
        Action.SKIP: 'skipped',
        Action.DELETE: 'deleted',
    }

    def __init__(self):
        self._stats = {
            'found': 0,
            'moved': 0,
            'copied': 0,
            'skipped': 0,
            'deleted': 0,
            'total_size': 0,
        }
        self.exited_early = False

    def set_found(self, count: int) -> None:
        """Record how many photos were enumerated in the source directory."""
        self._stats['found'] = count

    def record_action(self, action: Action, file_size: int = 0) -> None:
        """Count an applied action. Moved and copied files also add to total size."""
        if action is Action.EXIT:
            self.exited_early = True
            return
        self._stats[self._COUNTERS[action]] += 1
        if action in (Action.MOVE, Action.COPY):
            self._stats['total_size'] += file_size

    def get_stats(self) -> Dict[str, int]:
        """Get a copy of current statistics."""
        stats = self._stats.copy()
        stats['unvisited'] = self.get_unvisited()
        return stats

    def get_visited(self) -> int:
        return (self._stats['moved'] + self._stats['copied'] +
                self._stats['skipped'] + self._stats['deleted'])

    def get_unvisited(self) -> int:
        """Photos left untouched because the user exited early."""
        return self._stats['found'] - self.get_visited()

    def get_total_size_mb(self) -> float:
        return self._stats['total_size'] / (1024 * 1024)

    def get_found(self) -> int:
        return self._stats['found']

    def get_moved(self) -> int:
        return self._stats['moved']

    def get_copied(self) -> int:
        return self._stats['copied']

    def get_skipped(self) -> int:
        return self._stats['skipped']

    def get_deleted(self) -> int:
        return self._stats['deleted']
