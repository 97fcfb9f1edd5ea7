"""
app/repositories/dashboard_config_repository.py

Persistence helpers for the dashboard configuration JSON file.
"""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import replace
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Mapping

from app.domain.dashboard_config import (
    DashboardConfig,
    InvalidSnapshotSlotError,
    validate_slot,
)
from app.logging_utils import log_event
from app.repositories.errors import DashboardConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "dashboard_config.json"


def _parse_weights(raw: Any) -> dict[str, Decimal]:
    if not isinstance(raw, Mapping):
        raise DashboardConfigError("representativeness_weights must be an object of cycle -> percent.")
    weights: dict[str, Decimal] = {}
    for cycle, value in raw.items():
        if not isinstance(cycle, str) or not cycle.strip():
            raise DashboardConfigError("Cycle keys must be non-empty strings.")
        if isinstance(value, bool):
            raise DashboardConfigError(f"Weight for cycle {cycle!r} must be a number.")
        try:
            weight = Decimal(str(value))
        except InvalidOperation as exc:
            raise DashboardConfigError(f"Weight for cycle {cycle!r} must be a number.") from exc
        if not weight.is_finite() or weight < 0:
            raise DashboardConfigError(f"Weight for cycle {cycle!r} must be a non-negative number.")
        weights[cycle.strip()] = weight
    return weights


def _parse_threshold(raw: Any) -> int:
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise DashboardConfigError("risk_percent_threshold must be an integer between 0 and 100.")
    try:
        value = int(raw)
    except ValueError as exc:
        raise DashboardConfigError("risk_percent_threshold must be an integer between 0 and 100.") from exc
    if not 0 <= value <= 100:
        raise DashboardConfigError("risk_percent_threshold must be an integer between 0 and 100.")
    return value


def _parse_cycle(raw: Any) -> str:
    if not isinstance(raw, str) or not raw.strip():
        raise DashboardConfigError("current_cycle must be a non-empty string.")
    return raw.strip()


def _parse_slot(raw: Any) -> str:
    try:
        return validate_slot(raw if isinstance(raw, str) else "")
    except InvalidSnapshotSlotError as exc:
        raise DashboardConfigError(str(exc)) from exc


_FIELD_PARSERS = {
    "current_cycle": _parse_cycle,
    "active_snapshot_slot": _parse_slot,
    "representativeness_weights": _parse_weights,
    "risk_percent_threshold": _parse_threshold,
}


def _weight_to_json(value: Decimal) -> int | float:
    return int(value) if value == value.to_integral_value() else float(value)


def config_to_dict(config: DashboardConfig) -> dict[str, Any]:
    return {
        "current_cycle": config.current_cycle,
        "active_snapshot_slot": config.active_snapshot_slot,
        "representativeness_weights": {
            cycle: _weight_to_json(weight)
            for cycle, weight in config.representativeness_weights.items()
        },
        "risk_percent_threshold": config.risk_percent_threshold,
    }


class DashboardConfigRepository:
    """
    Loads and saves the dashboard config as one JSON document.

    Stored values are merged over the defaults; fields that are missing or
    invalid on disk fall back to their default.
    """

    def __init__(self, root_dir: str | Path, *, defaults: DashboardConfig | None = None) -> None:
        self._path = Path(root_dir) / CONFIG_FILE_NAME
        self._defaults = defaults or DashboardConfig()
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def get(self) -> DashboardConfig:
        """
        Resolve the current config from disk, falling back to defaults.
        """

        if not self._path.exists():
            return self._defaults

        try:
            stored = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.error("Dashboard config unreadable path=%s: %s", self._path, exc)
            return self._defaults
        if not isinstance(stored, dict):
            logger.error("Dashboard config is not a JSON object path=%s", self._path)
            return self._defaults

        values: dict[str, Any] = {}
        for name, parser in _FIELD_PARSERS.items():
            if name not in stored:
                continue
            try:
                values[name] = parser(stored[name])
            except DashboardConfigError as exc:
                logger.warning("Ignoring invalid stored config field=%s: %s", name, exc)
        return replace(self._defaults, **values)

    def update(self, changes: Mapping[str, Any]) -> DashboardConfig:
        """
        Apply a partial update, persist it and return the new config.

        Keys with a ``None`` value are ignored. Raises DashboardConfigError
        for unknown fields or invalid values; nothing is written then.
        """

        unknown = sorted(set(changes) - set(_FIELD_PARSERS))
        if unknown:
            raise DashboardConfigError(f"Unknown config fields: {', '.join(unknown)}.")

        values = {
            name: _FIELD_PARSERS[name](value)
            for name, value in changes.items()
            if value is not None
        }
        with self._lock:
            updated = replace(self.get(), **values)
            self.save(updated)
        return updated

    def save(self, config: DashboardConfig) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(f"{self._path.suffix}.tmp")
        tmp_path.write_text(json.dumps(config_to_dict(config), indent=2), encoding="utf-8")
        tmp_path.replace(self._path)
        log_event(
            logger,
            logging.INFO,
            "dashboard_config_saved",
            current_cycle=config.current_cycle,
            active_snapshot_slot=config.active_snapshot_slot,
            risk_percent_threshold=config.risk_percent_threshold,
        )
