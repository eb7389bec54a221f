"""Tests for the ConsultaIBGE facade using a substituted transport."""

from __future__ import annotations

from typing import Any

import pytest

from consulta_ibge.config.settings import Settings
from consulta_ibge.platform.ibge import (
    ConsultaIBGE,
    HTTPResponse,
    IBGEConnectionError,
    client as client_module,
)

ESTADOS = "https://servicodados.ibge.gov.br/api/v1/localidades/estados/"
DISTRITOS = "https://servicodados.ibge.gov.br/api/v1/localidades/distritos/"


def test_consultar_estado_returns_body_unmodified(
    fake_http: Any, settings: Settings, json_response: str
) -> None:
    """The mocked JSON body must come back byte for byte."""

    consulta = ConsultaIBGE(http_client=fake_http, settings=settings)

    assert consulta.consultar_estado("RJ") == json_response
    assert fake_http.calls[0][0] == ESTADOS + "RJ"


@pytest.mark.parametrize("identificador", [520005005, 310010405, 520010005])
def test_consultar_distrito_builds_district_url(
    fake_http: Any, settings: Settings, identificador: int
) -> None:
    consulta = ConsultaIBGE(http_client=fake_http, settings=settings)

    resposta = consulta.consultar_distrito(identificador)

    assert resposta
    assert [url for url, _ in fake_http.calls] == [DISTRITOS + str(identificador)]


def test_consultar_distrito_accepts_zero(fake_http: Any, settings: Settings) -> None:
    consulta = ConsultaIBGE(http_client=fake_http, settings=settings)

    _ = consulta.consultar_distrito(0)

    assert fake_http.calls[0][0] == DISTRITOS + "0"


def test_repeated_calls_are_idempotent(
    fake_http: Any, settings: Settings, json_response: str
) -> None:
    """Five identical queries give five identical answers and URLs."""

    consulta = ConsultaIBGE(http_client=fake_http, settings=settings)

    respostas = [consulta.consultar_estado("SP") for _ in range(5)]

    assert respostas == [json_response] * 5
    assert {url for url, _ in fake_http.calls} == {ESTADOS + "SP"}
    assert consulta.settings == settings


def test_sigla_is_sent_verbatim(fake_http: Any, settings: Settings) -> None:
    consulta = ConsultaIBGE(http_client=fake_http, settings=settings)

    _ = consulta.consultar_estado("sp")

    assert fake_http.calls[0][0] == ESTADOS + "sp"


def test_non_200_body_is_returned_as_is(make_http: Any, settings: Settings) -> None:
    """Content methods do not special-case error statuses."""

    http = make_http(response=HTTPResponse(status=404, text='{"erro":"nao encontrado"}'))
    consulta = ConsultaIBGE(http_client=http, settings=settings)

    assert consulta.consultar_estado("XX") == '{"erro":"nao encontrado"}'
    assert consulta.status_estado("XX") == 404


def test_status_helpers_use_the_same_transport(make_http: Any, settings: Settings) -> None:
    http = make_http(response=HTTPResponse(status=200, text="[]"))
    consulta = ConsultaIBGE(http_client=http, settings=settings)

    assert consulta.status_estado("SP") == 200
    assert consulta.status_distrito(520005005) == 200
    assert consulta.obter_status_code(ESTADOS + "RJ") == 200
    assert [url for url, _ in http.calls] == [
        ESTADOS + "SP",
        DISTRITOS + "520005005",
        ESTADOS + "RJ",
    ]


def test_request_headers(fake_http: Any) -> None:
    settings = Settings(
        base_url="https://example.test/api/",
        app_name="app",
        app_version="1.0",
        contact="mailto:dev@example.test",
    )
    consulta = ConsultaIBGE(http_client=fake_http, settings=settings)

    _ = consulta.consultar_estado("SP")

    url, headers = fake_http.calls[0]
    assert url == "https://example.test/api/estados/SP"
    assert headers == {
        "Accept": "application/json",
        "User-Agent": "app/1.0 (mailto:dev@example.test)",
    }


def test_user_agent_env_override(
    fake_http: Any, settings: Settings, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("IBGE_USER_AGENT", "custom-agent/9")
    consulta = ConsultaIBGE(http_client=fake_http, settings=settings)

    _ = consulta.consultar_distrito(1)

    assert fake_http.calls[0][1]["User-Agent"] == "custom-agent/9"


def test_transport_error_propagates(settings: Settings) -> None:
    class _Failing:
        def get(self, url: str, headers: dict[str, str]) -> HTTPResponse:
            raise IBGEConnectionError(url, "connection refused")

    consulta = ConsultaIBGE(http_client=_Failing(), settings=settings)

    with pytest.raises(IBGEConnectionError) as excinfo:
        _ = consulta.consultar_estado("SP")
    assert isinstance(excinfo.value, OSError)
    assert excinfo.value.url == ESTADOS + "SP"

    with pytest.raises(OSError):
        _ = consulta.consultar_distrito(520005005)


@pytest.mark.parametrize("sigla", [None, 35, b"SP"])
def test_consultar_estado_rejects_non_string(
    fake_http: Any, settings: Settings, sigla: Any
) -> None:
    consulta = ConsultaIBGE(http_client=fake_http, settings=settings)

    with pytest.raises(TypeError):
        _ = consulta.consultar_estado(sigla)
    assert fake_http.calls == []


@pytest.mark.parametrize("identificador", ["520005005", 1.5, True, None])
def test_consultar_distrito_rejects_non_int(
    fake_http: Any, settings: Settings, identificador: Any
) -> None:
    consulta = ConsultaIBGE(http_client=fake_http, settings=settings)

    with pytest.raises(TypeError):
        _ = consulta.consultar_distrito(identificador)
    assert fake_http.calls == []


def test_consultar_distrito_rejects_negative(fake_http: Any, settings: Settings) -> None:
    consulta = ConsultaIBGE(http_client=fake_http, settings=settings)

    with pytest.raises(ValueError):
        _ = consulta.consultar_distrito(-1)
    assert fake_http.calls == []


def test_module_helpers_delegate_to_default_client(
    fake_http: Any, settings: Settings, json_response: str
) -> None:
    client_module.configure_default_client(
        ConsultaIBGE(http_client=fake_http, settings=settings)
    )

    assert client_module.consultar_estado("RJ") == json_response
    assert client_module.consultar_distrito(520005005) == json_response
    assert client_module.obter_status_code(ESTADOS + "SP") == 200
    assert len(fake_http.calls) == 3


def test_default_client_reads_configured_base_url(
    fake_http: Any, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("CONSULTA_IBGE_BASE_URL", "http://localhost:8080/localidades/")
    monkeypatch.setattr(client_module, "DEFAULT_HTTP_CLIENT", fake_http)

    assert client_module.consultar_estado("MG")
    assert fake_http.calls[0][0] == "http://localhost:8080/localidades/estados/MG"
