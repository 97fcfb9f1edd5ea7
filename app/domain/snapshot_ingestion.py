"""
app/domain/snapshot_ingestion.py

Diagnostics produced while parsing a snapshot extract.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RowDiagnostic:
    """
    One row-level parse note. Logged for diagnostics, never raised.
    """

    row_number: int
    message: str
    column: str | None = None
    value: str | None = None


@dataclass(frozen=True)
class ParseSummary:
    """
    End-of-parse counts for one snapshot extract.
    """

    delimiter: str
    rows_read: int
    rows_kept: int
    rows_dropped: int
    diagnostics: list[RowDiagnostic] = field(default_factory=list)
