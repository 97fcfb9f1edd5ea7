"""
app/services/snapshot_loader.py

Service layer for snapshot loading.

A snapshot is a delimited text extract whose first line is the header.
Loading detects the delimiter, resolves header aliases, normalizes every
row and drops rows without a resolvable sector or reseller code. Parsed
records are cached per slot and reused while the source file keeps the
same modification timestamp.
"""

from __future__ import annotations

import csv
import io
import logging
from functools import lru_cache

from app.config import get_snapshot_settings
from app.domain.dashboard_config import validate_slot
from app.domain.sales_record import NormalizedRecord
from app.domain.snapshot_ingestion import ParseSummary, RowDiagnostic
from app.logging_utils import log_event
from app.mappers.schema_mapper import SchemaMapper
from app.repositories.snapshot_repository import SnapshotRepository
from app.services.snapshot_cache import CacheEntry, SnapshotCache, get_snapshot_cache
from app.validators.row_normalizer import RowNormalizer

logger = logging.getLogger(__name__)

CANDIDATE_DELIMITERS: tuple[str, ...] = ("|", ";", ",")
DEFAULT_DELIMITER = ","

_MAX_LOGGED_DIAGNOSTICS = 20


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class SnapshotFormatError(ValueError):
    """
    Raised when a snapshot cannot be decoded or tokenized at all.
    """


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def detect_delimiter(header_line: str) -> str:
    """
    Pick the candidate delimiter occurring most often in the header line.

    Falls back to ``,`` when no candidate occurs or when the highest count
    is shared by more than one candidate.
    """

    counts = {candidate: header_line.count(candidate) for candidate in CANDIDATE_DELIMITERS}
    best = max(counts.values())
    if best == 0:
        return DEFAULT_DELIMITER
    winners = [candidate for candidate, count in counts.items() if count == best]
    if len(winners) > 1:
        return DEFAULT_DELIMITER
    return winners[0]


def _decode(raw: bytes) -> str:
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise SnapshotFormatError("Snapshot must be UTF-8 encoded.") from exc


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class SnapshotLoader:
    """
    Coordinates snapshot reading, parsing, normalization and caching.
    """

    def __init__(
        self,
        *,
        repository: SnapshotRepository,
        cache: SnapshotCache | None = None,
        mapper: SchemaMapper | None = None,
        normalizer: RowNormalizer | None = None,
        log_parse_warnings: bool = True,
    ) -> None:
        self._repository = repository
        self._cache = cache if cache is not None else SnapshotCache()
        self._mapper = mapper or SchemaMapper()
        self._normalizer = normalizer or RowNormalizer()
        self._log_parse_warnings = log_parse_warnings

    @property
    def repository(self) -> SnapshotRepository:
        return self._repository

    @property
    def cache(self) -> SnapshotCache:
        return self._cache

    def load(self, slot: str) -> tuple[NormalizedRecord, ...]:
        """
        Return the normalized records of the slot's snapshot file.

        Raises SnapshotNotFoundError when the slot has no file yet.
        """

        slot = validate_slot(slot)
        info = self._repository.require_info(slot)

        cached = self._cache.get(slot, info.modified_at_ns)
        if cached is not None:
            log_event(logger, logging.DEBUG, "snapshot_cache_hit", slot=slot)
            return cached.records

        log_event(
            logger,
            logging.INFO,
            "snapshot_cache_miss",
            slot=slot,
            source_modified_at=info.modified_at,
        )
        source_text = _decode(self._repository.read_bytes(slot))
        return self.load_text(source_text, slot, source_modified_at=info.modified_at_ns)

    def load_text(
        self,
        source_text: str,
        slot: str,
        *,
        source_modified_at: int,
    ) -> tuple[NormalizedRecord, ...]:
        """
        Parse ``source_text`` for ``slot`` unless the cache already holds it.

        A cache hit requires the same ``source_modified_at``; any other
        value triggers a full re-parse that replaces the slot's entry.
        """

        slot = validate_slot(slot)
        cached = self._cache.get(slot, source_modified_at)
        if cached is not None:
            return cached.records

        records, summary = self.parse(source_text)
        self._cache.put(
            CacheEntry(slot=slot, records=records, source_modified_at=source_modified_at)
        )
        log_event(
            logger,
            logging.INFO,
            "snapshot_parsed",
            slot=slot,
            delimiter=summary.delimiter,
            rows_read=summary.rows_read,
            rows_kept=summary.rows_kept,
            rows_dropped=summary.rows_dropped,
        )
        return records

    def parse(self, source_text: str) -> tuple[tuple[NormalizedRecord, ...], ParseSummary]:
        """
        Parse one snapshot extract without touching the cache.
        """

        text = source_text.lstrip("\ufeff")
        header_line = text.split("\n", 1)[0]
        delimiter = detect_delimiter(header_line)

        records: list[NormalizedRecord] = []
        diagnostics: list[RowDiagnostic] = []
        rows_read = 0
        rows_dropped = 0

        try:
            reader = csv.DictReader(io.StringIO(text, newline=""), delimiter=delimiter)
            headers = reader.fieldnames or []
            if not headers:
                return (), ParseSummary(delimiter=delimiter, rows_read=0, rows_kept=0, rows_dropped=0)

            mapping = self._mapper.resolve_mapping(headers)
            if mapping.unmapped_fields and self._log_parse_warnings:
                logger.warning(
                    "Snapshot header has no column for fields=%s headers=%s",
                    ",".join(mapping.unmapped_fields),
                    list(mapping.source_headers),
                )

            row_number = 1
            while True:
                row_number += 1
                try:
                    raw_row = next(reader)
                except StopIteration:
                    break
                except csv.Error as exc:
                    rows_read += 1
                    rows_dropped += 1
                    diagnostics.append(
                        RowDiagnostic(row_number=row_number, message=f"Unreadable row dropped: {exc}")
                    )
                    continue

                if self._normalizer.is_completely_empty_row(raw_row):
                    continue
                rows_read += 1

                mapped_row = self._mapper.map_row(raw_row=raw_row, mapping=mapping)
                record, row_diagnostics = self._normalizer.normalize_mapped_row(
                    mapped_row=mapped_row,
                    row_number=row_number,
                )
                diagnostics.extend(row_diagnostics)
                if record is None:
                    rows_dropped += 1
                    continue
                records.append(record)
        except csv.Error as exc:
            raise SnapshotFormatError(f"Invalid snapshot format: {exc}") from exc

        self._log_diagnostics(diagnostics)
        return tuple(records), ParseSummary(
            delimiter=delimiter,
            rows_read=rows_read,
            rows_kept=len(records),
            rows_dropped=rows_dropped,
            diagnostics=diagnostics,
        )

    def _log_diagnostics(self, diagnostics: list[RowDiagnostic]) -> None:
        if not self._log_parse_warnings or not diagnostics:
            return
        for diagnostic in diagnostics[:_MAX_LOGGED_DIAGNOSTICS]:
            logger.debug(
                "Snapshot parse note row=%s column=%s message=%s value=%r",
                diagnostic.row_number,
                diagnostic.column,
                diagnostic.message,
                diagnostic.value,
            )
        if len(diagnostics) > _MAX_LOGGED_DIAGNOSTICS:
            logger.debug(
                "Snapshot parse notes truncated shown=%s total=%s",
                _MAX_LOGGED_DIAGNOSTICS,
                len(diagnostics),
            )


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_snapshot_loader() -> SnapshotLoader:
    """
    Build and cache the loader with env-driven settings and the shared cache.
    """

    settings = get_snapshot_settings()
    return SnapshotLoader(
        repository=SnapshotRepository(
            settings.data_dir,
            max_upload_bytes=settings.max_upload_bytes,
        ),
        cache=get_snapshot_cache(),
        log_parse_warnings=settings.log_parse_warnings,
    )
