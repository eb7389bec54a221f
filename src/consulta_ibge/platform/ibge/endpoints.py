"""Where: src/consulta_ibge/platform/ibge/endpoints.py
What: URL builders for the estados and distritos endpoints.
Why: Argument checks and URL joining live apart from the network call.
"""

from __future__ import annotations

from consulta_ibge.config.settings import DISTRITOS_PATH, ESTADOS_PATH


def _check_sigla(sigla: object) -> str:
    if sigla is None:
        raise TypeError("sigla must not be None")
    if not isinstance(sigla, str):
        raise TypeError(f"sigla must be a str, got {type(sigla).__name__}")
    return sigla


def _check_identificador(identificador: object) -> int:
    # bool is an int subclass but never a district code
    if isinstance(identificador, bool) or not isinstance(identificador, int):
        raise TypeError(
            f"identificador must be an int, got {type(identificador).__name__}"
        )
    if identificador < 0:
        raise ValueError(f"identificador must be non-negative, got {identificador}")
    return identificador


def estado_url(base_url: str, sigla: str) -> str:
    """Return ``<base>/estados/<sigla>``; the sigla is used verbatim."""

    return f"{base_url.rstrip('/')}/{ESTADOS_PATH}/{_check_sigla(sigla)}"


def distrito_url(base_url: str, identificador: int) -> str:
    """Return ``<base>/distritos/<identificador>``."""

    return f"{base_url.rstrip('/')}/{DISTRITOS_PATH}/{_check_identificador(identificador)}"


__all__ = ["distrito_url", "estado_url"]
