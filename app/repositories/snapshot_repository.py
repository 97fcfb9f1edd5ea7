"""
app/repositories/snapshot_repository.py

Local filesystem storage for the morning and afternoon snapshot files.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import BinaryIO

from app.domain.dashboard_config import validate_slot
from app.logging_utils import log_event
from app.repositories.errors import SnapshotNotFoundError, SnapshotStorageError, SnapshotTooLargeError

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 1024 * 1024


@dataclass(frozen=True)
class SnapshotFileInfo:
    """
    Size and modification time of one stored snapshot file.
    """

    slot: str
    size_bytes: int
    modified_at: datetime
    modified_at_ns: int


class SnapshotRepository:
    """
    Reads and writes ``snapshot_<slot>.csv`` files under one directory.
    """

    def __init__(self, root_dir: str | Path, *, max_upload_bytes: int = 50 * 1024 * 1024) -> None:
        self._root_dir = Path(root_dir)
        self._max_upload_bytes = max(1, max_upload_bytes)

    @property
    def root_dir(self) -> Path:
        return self._root_dir

    def path_for(self, slot: str) -> Path:
        return self._root_dir / f"snapshot_{validate_slot(slot)}.csv"

    def exists(self, slot: str) -> bool:
        return self.path_for(slot).is_file()

    def info(self, slot: str) -> SnapshotFileInfo | None:
        """
        Return file info for ``slot``, or ``None`` when nothing was uploaded yet.
        """

        path = self.path_for(slot)
        try:
            stat = path.stat()
        except FileNotFoundError:
            return None
        return SnapshotFileInfo(
            slot=validate_slot(slot),
            size_bytes=stat.st_size,
            modified_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
            modified_at_ns=stat.st_mtime_ns,
        )

    def require_info(self, slot: str) -> SnapshotFileInfo:
        info = self.info(slot)
        if info is None:
            raise SnapshotNotFoundError(f"Snapshot not found for slot {slot!r}.")
        return info

    def read_bytes(self, slot: str) -> bytes:
        try:
            return self.path_for(slot).read_bytes()
        except FileNotFoundError as exc:
            raise SnapshotNotFoundError(f"Snapshot not found for slot {slot!r}.") from exc

    def save(self, slot: str, stream: BinaryIO) -> SnapshotFileInfo:
        """
        Stream an upload into the slot file, replacing it atomically.

        Raises SnapshotTooLargeError when the stream exceeds the size limit;
        the previous file is left untouched in that case.
        """

        target = self.path_for(slot)
        target.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = target.with_suffix(f"{target.suffix}.tmp")

        written = 0
        try:
            with tmp_path.open("wb") as handle:
                while True:
                    chunk = stream.read(_CHUNK_SIZE)
                    if not chunk:
                        break
                    written += len(chunk)
                    if written > self._max_upload_bytes:
                        raise SnapshotTooLargeError(
                            f"Snapshot exceeds the {self._max_upload_bytes} byte limit."
                        )
                    handle.write(chunk)
            tmp_path.replace(target)
        except OSError as exc:
            raise SnapshotStorageError("Failed to write snapshot file.") from exc
        finally:
            if tmp_path.exists():
                try:
                    tmp_path.unlink()
                except OSError:
                    pass

        info = self.require_info(slot)
        log_event(
            logger,
            logging.INFO,
            "snapshot_saved",
            slot=info.slot,
            size_bytes=info.size_bytes,
        )
        return info
