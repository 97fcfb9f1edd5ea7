"""
sectors/catalog.py

Canonical sector table shipped with the service.

The table is an ordered sequence of ``(label, code)`` pairs. Order is
load-bearing: tolerant lookups walk it top to bottom and the first match
wins, so entries must never be sorted or deduplicated.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SectorEntry:
    """
    One canonical sector: free-text label and its numeric code.
    """

    label: str
    code: str


SECTOR_CATALOG: tuple[SectorEntry, ...] = (
    SectorEntry("PRATA / Palmeira / Igaci /", "1260"),
    SectorEntry("PLATINA & OURO / Palmeira / Igaci /Major / Cacimbinhas / Estrela / Min", "4005"),
    SectorEntry("PRATA 2 / Major / Cacimbinhas / Estrela / Quebrangulo / Minador /", "8238"),
    SectorEntry("SUPERVISORA DE RELACIONAMENTO PALMEIRA DOS INDIOS", "8239"),
    SectorEntry("FVC - 13706 - A - ALCINA MARIA 1", "14210"),
    SectorEntry("FVC - 13706- BER - ALCINA MARIA", "16283"),
    SectorEntry("FVC - 13706 - A - ALCINA MARIA 2", "16289"),
    SectorEntry("Setor Multimarcas - PALMEIRA DOS INDIOS - CP ALCINA MARIA", "16471"),
    SectorEntry("PLATINA / Palmeira /", "17539"),
    SectorEntry("FVC - 13706 - ALCINA MARIA REINÍCIOS", "18787"),
    SectorEntry("13706 - ALCINA MARIA - SETOR DEVOLUÇÃO", "19699"),
    SectorEntry("BRONZE / Todas as cidades 13706", "23032"),
    SectorEntry("SETOR PADRÃO", "23336"),
    SectorEntry("INICIOS CENTRAL 13706", "15775"),
    SectorEntry("SUPERVISORA DE RELACIONAMENTO", "1414"),
    SectorEntry("PRATA 2 / Coruripe / Piaçabuçu / F. Deserto / São Sebastião /", "1415"),
    SectorEntry("BRONZE / Todas as cidades 13707", "3124"),
    SectorEntry("BRONZE 2 / Todas as cidades 13707", "8317"),
    SectorEntry("PLATINA / Penedo /", "9540"),
    SectorEntry("FVC - 13707 - A - ALCINA MARIA 1", "14211"),
    SectorEntry("PRATA 3 / I.Nova / Junqueiro / Olho D' Agua / Porto Real / São Brás /", "14244"),
    SectorEntry("PRATA 1 / Penedo /", "14245"),
    SectorEntry("OURO / Penedo /", "14246"),
    SectorEntry("FVC - 13707 - A - ALCINA MARIA 2", "15242"),
    SectorEntry("INICIOS CENTRAL 13707", "15774"),
    SectorEntry("FVC - 13707- BER - ALCINA MARIA", "16284"),
    SectorEntry("Setor Multimarcas - PENEDO - CP ALCINA MARIA", "16472"),
    SectorEntry("FVC - 13707 - A - ALCINA MARIA 3", "16635"),
    SectorEntry("FVC - 13707 - ALCINA MARIA REINÍCIOS", "18788"),
    SectorEntry("13707 - ALCINA MARIA - SETOR DEVOLUÇÃO", "19698"),
    SectorEntry("SETOR PADRÃO", "23557"),
)
