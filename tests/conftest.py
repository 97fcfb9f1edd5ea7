"""
tests/conftest.py

Shared fixtures: record factory and on-disk snapshot helpers.
"""

from __future__ import annotations

import os
from decimal import Decimal
from pathlib import Path
from typing import Callable

import pytest

from app.domain.sales_record import NormalizedRecord

SNAPSHOT_HEADER = (
    "Setor;CodigoRevendedor;NomeRevendedora;CicloFaturamento;CodigoProduto;"
    "NomeProduto;QuantidadeItens;ValorPraticado;Tipo"
)


def snapshot_text(*rows: str, header: str = SNAPSHOT_HEADER) -> str:
    return "\n".join((header, *rows)) + "\n"


def make_record(
    reseller_code: str = "R1",
    amount: str | Decimal = "0",
    *,
    sector_label: str = "OURO / Penedo /",
    sector_code: str | None = "14246",
    reseller_name: str | None = None,
    billing_cycle: str = "01/2026",
    item_quantity: int = 1,
    kind: str = "venda",
) -> NormalizedRecord:
    return NormalizedRecord(
        sector_label=sector_label,
        sector_code=sector_code,
        reseller_code=reseller_code,
        reseller_name=reseller_name if reseller_name is not None else f"Reseller {reseller_code}",
        billing_cycle=billing_cycle,
        product_code="P1",
        product_name="Produto",
        item_quantity=item_quantity,
        amount=Decimal(amount),
        kind=kind,
    )


@pytest.fixture()
def write_snapshot(tmp_path: Path) -> Callable[..., Path]:
    """
    Write ``snapshot_<slot>.csv`` under tmp_path, optionally forcing its mtime.
    """

    def _write(slot: str, text: str, *, mtime_ns: int | None = None) -> Path:
        path = tmp_path / f"snapshot_{slot}.csv"
        path.write_text(text, encoding="utf-8")
        if mtime_ns is not None:
            os.utime(path, ns=(mtime_ns, mtime_ns))
        return path

    return _write


@pytest.fixture()
def record() -> Callable[..., NormalizedRecord]:
    return make_record


@pytest.fixture()
def snapshot() -> Callable[..., str]:
    return snapshot_text
