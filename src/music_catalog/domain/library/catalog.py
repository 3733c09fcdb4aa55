"""
In-memory catalog snapshot.

Readers get an immutable tuple and never lock. Writers serialize on a lock,
build a complete new tuple and swap the reference, so a reader observes
either the old snapshot or the new one.
"""

import threading
from typing import Iterable

from .models import Track


class Catalog:
    """Owns the process-wide, read-mostly list of known tracks."""

    def __init__(self, tracks: Iterable[Track] = ()):
        self._tracks: tuple[Track, ...] = tuple(tracks)
        self._write_lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._tracks)

    def snapshot(self) -> tuple[Track, ...]:
        """Current tracks in catalog order."""
        return self._tracks

    def publish(self, track: Track) -> None:
        """Add a track, replacing any existing entry with the same title in place."""
        with self._write_lock:
            current = self._tracks
            for i, existing in enumerate(current):
                if existing.title == track.title:
                    self._tracks = current[:i] + (track,) + current[i + 1:]
                    return
            self._tracks = current + (track,)

