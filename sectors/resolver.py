"""
sectors/resolver.py

Tolerant sector resolution against the canonical sector table.

Resolution order (first match wins):
    1. Leading digit run on the label (label already stamped with its code).
    2. Exact match of the trimmed label against the table.
    3. Case-insensitive, whitespace-collapsed substring match in either
       direction, walking the table in declared order.

Step 3 is ambiguous for short labels; the first declared entry wins.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Sequence

from sectors.base import BaseSectorResolver
from sectors.catalog import SECTOR_CATALOG, SectorEntry

_LEADING_CODE_RE = re.compile(r"^(\d+)")
_WHITESPACE_RE = re.compile(r"\s+")


def _collapse(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip().lower()


class SubstringSectorResolver(BaseSectorResolver):
    """
    Resolves sector labels with the order-dependent substring strategy.
    """

    def __init__(self, catalog: Sequence[SectorEntry] | None = None) -> None:
        self._catalog: tuple[SectorEntry, ...] = tuple(
            SECTOR_CATALOG if catalog is None else catalog
        )
        self._collapsed: tuple[tuple[str, str], ...] = tuple(
            (_collapse(entry.label), entry.code) for entry in self._catalog
        )

    @property
    def catalog(self) -> tuple[SectorEntry, ...]:
        return self._catalog

    def extract_sector_id(self, sector_label: str | None) -> str | None:
        if sector_label is None:
            return None
        label = str(sector_label).strip()
        if not label:
            return None

        match = _LEADING_CODE_RE.match(label)
        if match:
            return match.group(1)
        return self.find_sector_code(label)

    def find_sector_code(self, sector_label: str | None) -> str | None:
        if sector_label is None:
            return None
        label = str(sector_label).strip()
        if not label:
            return None

        for entry in self._catalog:
            if entry.label == label:
                return entry.code

        collapsed = _collapse(label)
        for key, code in self._collapsed:
            if key in collapsed or collapsed in key:
                return code
        return None


@lru_cache(maxsize=1)
def get_sector_resolver() -> SubstringSectorResolver:
    """
    Return the process-wide resolver built on the shipped catalog.
    """

    return SubstringSectorResolver()
