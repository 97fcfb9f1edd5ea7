"""
app/validators/row_normalizer.py

Row-level normalization and type parsing for snapshot extracts.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

from app.domain.sales_record import NormalizedRecord
from app.domain.snapshot_ingestion import RowDiagnostic
from app.validators.monetary import parse_monetary_value_checked
from sectors.base import BaseSectorResolver
from sectors.resolver import get_sector_resolver

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

DEFAULT_ITEM_QUANTITY = 1


class RowNormalizer:
    """
    Turns mapped logical field values into NormalizedRecord instances.

    Rows without a resolvable sector or without a reseller code are
    dropped; every other defect degrades to a default value.
    """

    def __init__(self, *, sector_resolver: BaseSectorResolver | None = None) -> None:
        self._sector_resolver = sector_resolver or get_sector_resolver()

    def is_completely_empty_row(self, row: Mapping[Any, Any]) -> bool:
        """
        Return True when all values in the row are empty or whitespace.
        """

        return all(self._is_blank(value) for value in row.values())

    def normalize_mapped_row(
        self,
        *,
        mapped_row: Mapping[str, str | None],
        row_number: int,
    ) -> tuple[NormalizedRecord | None, list[RowDiagnostic]]:
        """
        Normalize one mapped row.

        Returns the record (or ``None`` when the row is dropped) together
        with the diagnostics collected while parsing it.
        """

        diagnostics: list[RowDiagnostic] = []

        sector_label = self._parse_string(mapped_row.get("sector_label"))
        reseller_code = self._parse_string(mapped_row.get("reseller_code"))

        sector_code = self._sector_resolver.extract_sector_id(sector_label)
        if sector_code is None:
            diagnostics.append(
                RowDiagnostic(
                    row_number=row_number,
                    column="sector_label",
                    message="Sector could not be resolved; row dropped.",
                    value=sector_label or None,
                )
            )
        if not reseller_code:
            diagnostics.append(
                RowDiagnostic(
                    row_number=row_number,
                    column="reseller_code",
                    message="Reseller code is missing; row dropped.",
                )
            )
        if diagnostics:
            return None, diagnostics

        amount_parse = parse_monetary_value_checked(mapped_row.get("amount"))
        if amount_parse.warning is not None:
            diagnostics.append(
                RowDiagnostic(
                    row_number=row_number,
                    column="amount",
                    message=f"{amount_parse.warning} Using 0.",
                    value=self._stringify_value(mapped_row.get("amount")),
                )
            )

        item_quantity = self._parse_item_quantity(
            value=mapped_row.get("item_quantity"),
            row_number=row_number,
            diagnostics=diagnostics,
        )

        return (
            NormalizedRecord(
                sector_label=sector_label,
                sector_code=sector_code,
                reseller_code=reseller_code,
                reseller_name=self._parse_string(mapped_row.get("reseller_name")),
                billing_cycle=self._parse_string(mapped_row.get("billing_cycle")),
                product_code=self._parse_string(mapped_row.get("product_code")),
                product_name=self._parse_string(mapped_row.get("product_name")),
                item_quantity=item_quantity,
                amount=amount_parse.amount,
                kind=self._parse_string(mapped_row.get("kind")).lower(),
            ),
            diagnostics,
        )

    def _parse_item_quantity(
        self,
        *,
        value: str | None,
        row_number: int,
        diagnostics: list[RowDiagnostic],
    ) -> int:
        if self._is_blank(value):
            return DEFAULT_ITEM_QUANTITY

        match = _LEADING_INT_RE.match(str(value))
        parsed = int(match.group(1)) if match else None
        if parsed is None or parsed < 0:
            diagnostics.append(
                RowDiagnostic(
                    row_number=row_number,
                    column="item_quantity",
                    message=f"Invalid item quantity; using {DEFAULT_ITEM_QUANTITY}.",
                    value=self._stringify_value(value),
                )
            )
            return DEFAULT_ITEM_QUANTITY
        return parsed

    @staticmethod
    def _parse_string(value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @staticmethod
    def _is_blank(value: Any) -> bool:
        if value is None:
            return True
        if isinstance(value, (list, tuple)):
            return all(str(item).strip() == "" for item in value)
        return str(value).strip() == ""

    @staticmethod
    def _stringify_value(value: Any) -> str | None:
        if value is None:
            return None
        return str(value)
