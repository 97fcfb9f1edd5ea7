from __future__ import annotations

import json
import unittest
from decimal import Decimal
from pathlib import Path
from tempfile import TemporaryDirectory

from app.domain.dashboard_config import DEFAULT_REPRESENTATIVENESS_WEIGHTS, DashboardConfig
from app.repositories.dashboard_config_repository import DashboardConfigRepository, config_to_dict
from app.repositories.errors import DashboardConfigError


class TestDashboardConfigRepository(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.repository = DashboardConfigRepository(self.root)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_defaults_when_nothing_stored(self) -> None:
        config = self.repository.get()

        self.assertEqual(config.current_cycle, "01/2026")
        self.assertEqual(config.active_snapshot_slot, "afternoon")
        self.assertEqual(config.risk_percent_threshold, 30)
        self.assertEqual(config.representativeness_weights, DEFAULT_REPRESENTATIVENESS_WEIGHTS)

    def test_partial_update_is_persisted(self) -> None:
        updated = self.repository.update({"current_cycle": " 02/2026 ", "active_snapshot_slot": "Morning"})

        self.assertEqual(updated.current_cycle, "02/2026")
        self.assertEqual(updated.active_snapshot_slot, "morning")
        self.assertEqual(updated.risk_percent_threshold, 30)

        reloaded = DashboardConfigRepository(self.root).get()
        self.assertEqual(reloaded, updated)

    def test_none_values_are_ignored(self) -> None:
        updated = self.repository.update({"current_cycle": None, "risk_percent_threshold": 45})

        self.assertEqual(updated.current_cycle, "01/2026")
        self.assertEqual(updated.risk_percent_threshold, 45)

    def test_weights_are_replaced_as_a_whole(self) -> None:
        updated = self.repository.update({"representativeness_weights": {"01/2026": 40, "02/2026": 60.5}})

        self.assertEqual(
            updated.representativeness_weights,
            {"01/2026": Decimal("40"), "02/2026": Decimal("60.5")},
        )
        stored = json.loads(self.repository.path.read_text(encoding="utf-8"))
        self.assertEqual(stored["representativeness_weights"], {"01/2026": 40, "02/2026": 60.5})

    def test_invalid_updates_are_rejected_without_writing(self) -> None:
        invalid_changes = (
            {"risk_percent_threshold": 150},
            {"risk_percent_threshold": True},
            {"active_snapshot_slot": "evening"},
            {"current_cycle": "   "},
            {"representativeness_weights": {"01/2026": -1}},
            {"representativeness_weights": {"01/2026": "abc"}},
            {"representativeness_weights": [1, 2]},
            {"unknown_field": 1},
        )
        for changes in invalid_changes:
            with self.subTest(changes=changes):
                with self.assertRaises(DashboardConfigError):
                    self.repository.update(changes)

        self.assertFalse(self.repository.path.exists())

    def test_corrupt_file_falls_back_to_defaults(self) -> None:
        self.repository.path.write_text("{not json", encoding="utf-8")

        self.assertEqual(self.repository.get(), DashboardConfig())

    def test_non_object_file_falls_back_to_defaults(self) -> None:
        self.repository.path.write_text("[1, 2, 3]", encoding="utf-8")

        self.assertEqual(self.repository.get(), DashboardConfig())

    def test_invalid_stored_field_keeps_its_default(self) -> None:
        self.repository.path.write_text(
            json.dumps({"active_snapshot_slot": "noon", "risk_percent_threshold": 10}),
            encoding="utf-8",
        )

        config = self.repository.get()

        self.assertEqual(config.active_snapshot_slot, "afternoon")
        self.assertEqual(config.risk_percent_threshold, 10)

    def test_config_to_dict(self) -> None:
        payload = config_to_dict(DashboardConfig())

        self.assertEqual(payload["representativeness_weights"]["06/2026"], 15)
        self.assertIsInstance(payload["representativeness_weights"]["06/2026"], int)


if __name__ == "__main__":
    unittest.main()
