"""
sectors/base.py

Abstract base interface for sector resolvers.
Callers depend on BaseSectorResolver so the matching strategy can be
replaced without touching the loader or the aggregator.
"""

from abc import ABC, abstractmethod


class BaseSectorResolver(ABC):
    """Abstract base class for sector label resolution.

    A resolver maps a raw, human-entered sector label to a canonical
    sector code, or ``None`` when the label cannot be resolved.
    """

    @abstractmethod
    def extract_sector_id(self, sector_label: str | None) -> str | None:
        """Resolve a raw sector label, honouring codes stamped on the label.

        Args:
            sector_label: Free-text sector label from a snapshot row.

        Returns:
            The sector code, or ``None`` when unresolvable.
        """
        raise NotImplementedError("Subclasses must implement extract_sector_id()")

    @abstractmethod
    def find_sector_code(self, sector_label: str | None) -> str | None:
        """Resolve a raw sector label through the canonical table only.

        Args:
            sector_label: Free-text sector label.

        Returns:
            The sector code, or ``None`` when no table entry matches.
        """
        raise NotImplementedError("Subclasses must implement find_sector_code()")
