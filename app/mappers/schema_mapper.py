"""
app/mappers/schema_mapper.py

Header aliasing for snapshot extracts.

Each logical field accepts several header spellings (plain, camel-case,
upper-case and human-readable with accents). Aliases are tried in
declared order and the first one carrying a non-blank value wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

LOGICAL_FIELDS: tuple[str, ...] = (
    "sector_label",
    "reseller_code",
    "reseller_name",
    "billing_cycle",
    "product_code",
    "product_name",
    "item_quantity",
    "amount",
    "kind",
)

DEFAULT_COLUMN_ALIASES: dict[str, tuple[str, ...]] = {
    "sector_label": ("Setor", "setor", "SETOR"),
    "reseller_code": ("CodigoRevendedor", "codigoRevendedor", "CODIGOREVENDEDOR", "Código Revendedor"),
    "reseller_name": ("NomeRevendedora", "nomeRevendedora", "NOMEREVENDEDORA", "Nome Revendedora"),
    "billing_cycle": ("CicloFaturamento", "cicloFaturamento", "CICLOFATURAMENTO", "Ciclo Faturamento"),
    "product_code": ("CodigoProduto", "codigoProduto", "CODIGOPRODUTO", "Código Produto"),
    "product_name": ("NomeProduto", "nomeProduto", "NOMEPRODUTO", "Nome Produto"),
    "item_quantity": ("QuantidadeItens", "quantidadeItens", "QUANTIDADEITENS", "Quantidade Itens"),
    "amount": ("ValorPraticado", "valorPraticado", "VALORPRATICADO", "Valor Praticado"),
    "kind": ("Tipo", "tipo", "TIPO"),
}


@dataclass(frozen=True)
class MappingResolution:
    """
    Source headers found for each logical field, in alias priority order.
    """

    field_to_sources: dict[str, tuple[str, ...]]
    source_headers: tuple[str, ...]

    @property
    def unmapped_fields(self) -> tuple[str, ...]:
        return tuple(name for name in LOGICAL_FIELDS if not self.field_to_sources.get(name))


class SchemaMapper:
    """
    Resolves snapshot headers into logical field mappings.
    """

    def __init__(self, *, aliases: Mapping[str, Sequence[str]] | None = None) -> None:
        self._aliases: dict[str, tuple[str, ...]] = {
            logical: tuple(values)
            for logical, values in (aliases or DEFAULT_COLUMN_ALIASES).items()
        }

    def resolve_mapping(self, headers: Sequence[str | None]) -> MappingResolution:
        """
        Match the snapshot header row against the alias table.

        Header cells are compared after trimming surrounding whitespace.
        """

        source_headers = tuple(header for header in headers if header is not None)
        stripped_lookup: dict[str, str] = {}
        for header in source_headers:
            stripped_lookup.setdefault(header.strip(), header)

        resolved: dict[str, tuple[str, ...]] = {}
        for logical_field in LOGICAL_FIELDS:
            resolved[logical_field] = tuple(
                stripped_lookup[alias]
                for alias in self._aliases.get(logical_field, ())
                if alias in stripped_lookup
            )

        return MappingResolution(field_to_sources=resolved, source_headers=source_headers)

    def map_row(
        self,
        *,
        raw_row: Mapping[str | None, object],
        mapping: MappingResolution,
    ) -> dict[str, str | None]:
        """
        Map one raw row into logical field values (``None`` when absent).
        """

        return {
            logical_field: self._first_present(raw_row, sources)
            for logical_field, sources in mapping.field_to_sources.items()
        }

    @staticmethod
    def _first_present(raw_row: Mapping[str | None, object], sources: Sequence[str]) -> str | None:
        for source in sources:
            value = raw_row.get(source)
            if value is None:
                continue
            text = str(value)
            if text.strip():
                return text
        return None
