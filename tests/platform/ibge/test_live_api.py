"""Live checks against the public IBGE API.

Skipped unless ``IBGE_LIVE_TESTS=1`` is set.
"""

from __future__ import annotations

import json
import os

import pytest

from consulta_ibge.platform.ibge import ConsultaIBGE

pytestmark = [
    pytest.mark.network,
    pytest.mark.skipif(
        os.getenv("IBGE_LIVE_TESTS") != "1",
        reason="set IBGE_LIVE_TESTS=1 to query the live IBGE API",
    ),
]

SIGLAS = ["RO", "AC", "AM", "RR", "PA", "AP", "TO", "MA", "PI", "CE", "RN", "PB", "PE", "AL", "SE", "BA", "MG", "ES"]


@pytest.fixture
def consulta() -> ConsultaIBGE:
    return ConsultaIBGE()


def test_status_for_sao_paulo_is_200(consulta: ConsultaIBGE) -> None:
    assert consulta.status_estado("SP") == 200


@pytest.mark.parametrize("sigla", SIGLAS)
def test_consultar_estados(consulta: ConsultaIBGE, sigla: str) -> None:
    resposta = consulta.consultar_estado(sigla)

    assert resposta, "A resposta não deve estar vazia"
    assert json.loads(resposta)["sigla"] == sigla
    assert consulta.status_estado(sigla) == 200


@pytest.mark.parametrize("identificador", [520005005, 310010405, 520010005])
def test_consultar_distrito(consulta: ConsultaIBGE, identificador: int) -> None:
    resposta = consulta.consultar_distrito(identificador)

    assert resposta
    assert consulta.status_distrito(identificador) == 200
