"""Shared reference data."""

from .ufs import REGIOES, UF, UFS, is_known_sigla, uf_by_sigla

__all__ = ["REGIOES", "UF", "UFS", "is_known_sigla", "uf_by_sigla"]
