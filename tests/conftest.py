"""Shared pytest fixtures for the consulta-ibge test suite."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from consulta_ibge.config.settings import Settings
from consulta_ibge.platform.ibge.http_client import HTTPResponse

BASE_URL = "https://servicodados.ibge.gov.br/api/v1/localidades"
JSON_RESPONSE = (
    '{"id":33,"sigla":"RJ","nome":"Rio de Janeiro",'
    '"regiao":{"id":3,"sigla":"SE","nome":"Sudeste"}}'
)


@dataclass
class FakeHTTPClient:
    """Transport double returning a fixed response and recording calls."""

    response: HTTPResponse = field(
        default_factory=lambda: HTTPResponse(status=200, text=JSON_RESPONSE)
    )
    calls: list[tuple[str, dict[str, str]]] = field(default_factory=list)

    def get(self, url: str, headers: dict[str, str]) -> HTTPResponse:
        self.calls.append((url, dict(headers)))
        return self.response


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Iterator[Path]:
    """Point repo-root detection at a temp dir and reset singletons."""

    for var in ("CONSULTA_IBGE_BASE_URL", "CONSULTA_IBGE_CONFIG", "IBGE_USER_AGENT"):
        monkeypatch.delenv(var, raising=False)

    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")

    import consulta_ibge.config.paths as paths
    from consulta_ibge.config.config import Config
    from consulta_ibge.platform.ibge import client

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    Config._instance = None  # pyright: ignore[reportPrivateUsage]
    client.configure_default_client(None)

    yield tmp_path

    Config._instance = None  # pyright: ignore[reportPrivateUsage]
    client.configure_default_client(None)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        base_url=BASE_URL,
        app_name="consulta-ibge",
        app_version="0.1.0",
        contact="",
    )


@pytest.fixture
def fake_http() -> FakeHTTPClient:
    return FakeHTTPClient()


@pytest.fixture
def json_response() -> str:
    return JSON_RESPONSE


@pytest.fixture
def make_http() -> type[FakeHTTPClient]:
    """Expose the fake transport class for tests needing custom responses."""

    return FakeHTTPClient
