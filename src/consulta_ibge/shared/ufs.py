"""Summary: Static table of Brazilian federative units and their regions.
Why: Let the CLI hint at typos without a network round trip.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class UF:
    """A federative unit as listed by IBGE."""

    id: int
    sigla: str
    nome: str
    regiao: str


# Region siglas mapped to their IBGE id and name.
REGIOES: Final[dict[str, tuple[int, str]]] = {
    "N": (1, "Norte"),
    "NE": (2, "Nordeste"),
    "SE": (3, "Sudeste"),
    "S": (4, "Sul"),
    "CO": (5, "Centro-Oeste"),
}

UFS: Final[tuple[UF, ...]] = (
    UF(11, "RO", "Rondônia", "N"),
    UF(12, "AC", "Acre", "N"),
    UF(13, "AM", "Amazonas", "N"),
    UF(14, "RR", "Roraima", "N"),
    UF(15, "PA", "Pará", "N"),
    UF(16, "AP", "Amapá", "N"),
    UF(17, "TO", "Tocantins", "N"),
    UF(21, "MA", "Maranhão", "NE"),
    UF(22, "PI", "Piauí", "NE"),
    UF(23, "CE", "Ceará", "NE"),
    UF(24, "RN", "Rio Grande do Norte", "NE"),
    UF(25, "PB", "Paraíba", "NE"),
    UF(26, "PE", "Pernambuco", "NE"),
    UF(27, "AL", "Alagoas", "NE"),
    UF(28, "SE", "Sergipe", "NE"),
    UF(29, "BA", "Bahia", "NE"),
    UF(31, "MG", "Minas Gerais", "SE"),
    UF(32, "ES", "Espírito Santo", "SE"),
    UF(33, "RJ", "Rio de Janeiro", "SE"),
    UF(35, "SP", "São Paulo", "SE"),
    UF(41, "PR", "Paraná", "S"),
    UF(42, "SC", "Santa Catarina", "S"),
    UF(43, "RS", "Rio Grande do Sul", "S"),
    UF(50, "MS", "Mato Grosso do Sul", "CO"),
    UF(51, "MT", "Mato Grosso", "CO"),
    UF(52, "GO", "Goiás", "CO"),
    UF(53, "DF", "Distrito Federal", "CO"),
)

_BY_SIGLA: Final[dict[str, UF]] = {uf.sigla: uf for uf in UFS}


def uf_by_sigla(sigla: str) -> UF | None:
    """Look up a UF by its exact sigla."""

    return _BY_SIGLA.get(sigla)


def is_known_sigla(sigla: str) -> bool:
    return sigla in _BY_SIGLA


__all__ = ["REGIOES", "UF", "UFS", "is_known_sigla", "uf_by_sigla"]
