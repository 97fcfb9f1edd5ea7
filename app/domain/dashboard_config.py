"""
app/domain/dashboard_config.py

Dashboard configuration consumed by the tiering pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal


class SnapshotSlot:
    MORNING = "morning"
    AFTERNOON = "afternoon"


ALLOWED_SNAPSHOT_SLOTS = (SnapshotSlot.MORNING, SnapshotSlot.AFTERNOON)


class InvalidSnapshotSlotError(ValueError):
    """
    Raised when a slot identifier is not one of the known snapshot slots.
    """


def validate_slot(slot: str) -> str:
    normalized = (slot or "").strip().lower()
    if normalized not in ALLOWED_SNAPSHOT_SLOTS:
        allowed = ", ".join(ALLOWED_SNAPSHOT_SLOTS)
        raise InvalidSnapshotSlotError(f"Invalid snapshot slot {slot!r}. Allowed values: {allowed}.")
    return normalized


DEFAULT_REPRESENTATIVENESS_WEIGHTS: dict[str, Decimal] = {
    "01/2026": Decimal("8"),
    "02/2026": Decimal("11"),
    "03/2026": Decimal("11"),
    "04/2026": Decimal("12"),
    "05/2026": Decimal("11"),
    "06/2026": Decimal("15"),
    "07/2026": Decimal("10"),
    "08/2026": Decimal("11"),
    "09/2026": Decimal("10"),
}


@dataclass(frozen=True)
class DashboardConfig:
    """
    Operator-maintained settings for the current billing cycle.

    ``representativeness_weights`` maps cycle -> percent and is expected to
    sum to 100 across all cycles.
    """

    current_cycle: str = "01/2026"
    active_snapshot_slot: str = SnapshotSlot.AFTERNOON
    representativeness_weights: dict[str, Decimal] = field(
        default_factory=lambda: dict(DEFAULT_REPRESENTATIVENESS_WEIGHTS)
    )
    risk_percent_threshold: int = 30
