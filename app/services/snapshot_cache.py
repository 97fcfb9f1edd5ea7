"""
app/services/snapshot_cache.py

Per-slot cache of parsed snapshot records.

One entry per slot, keyed by the source file's modification timestamp.
Entries never expire by time; a different timestamp makes the entry
stale and the loader replaces it after a full re-parse.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from functools import lru_cache

from app.domain.sales_record import NormalizedRecord


@dataclass(frozen=True)
class CacheEntry:
    """
    Parsed records of one slot and the source timestamp they came from.
    """

    slot: str
    records: tuple[NormalizedRecord, ...]
    source_modified_at: int


class SnapshotCache:
    """
    Holds at most one CacheEntry per snapshot slot.

    Reads and writes take an internal lock so concurrent requests never
    observe a half-replaced entry. The check-then-reload done by the
    loader is not atomic with respect to writers of the source file.
    """

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, slot: str, source_modified_at: int) -> CacheEntry | None:
        """
        Return the entry for ``slot`` when it was built from the same timestamp.
        """

        with self._lock:
            entry = self._entries.get(slot)
        if entry is None or entry.source_modified_at != source_modified_at:
            return None
        return entry

    def put(self, entry: CacheEntry) -> None:
        with self._lock:
            self._entries[entry.slot] = entry

    def invalidate(self, slot: str | None = None) -> None:
        """
        Drop one slot's entry, or every entry when ``slot`` is None.
        """

        with self._lock:
            if slot is None:
                self._entries.clear()
            else:
                self._entries.pop(slot, None)

    def peek(self, slot: str) -> CacheEntry | None:
        with self._lock:
            return self._entries.get(slot)


@lru_cache(maxsize=1)
def get_snapshot_cache() -> SnapshotCache:
    """
    Return the process-wide snapshot cache.
    """

    return SnapshotCache()
