"""Where: src/consulta_ibge/platform/ibge/client.py
What: Facade querying IBGE estados and distritos and returning raw JSON text.
Why: Delegate networking and URL building to focused collaborators while
     exposing a tiny public API.

Collaborators:
- ``http_client`` performs the GET behind an injectable protocol
- ``endpoints`` validates arguments and builds the URLs
- ``user_agent`` formats the identity sent with each request

The module-level ``consultar_estado``, ``consultar_distrito`` and
``obter_status_code`` delegate to a lazily built default client.
"""

from __future__ import annotations

from typing import Final

from consulta_ibge.config.settings import Settings, load_settings
from consulta_ibge.platform.logging import logger

from .endpoints import distrito_url, estado_url
from .http_client import DEFAULT_HTTP_CLIENT, HTTPClient, HTTPResponse
from .user_agent import resolve_user_agent

_ACCEPT: Final[str] = "application/json"


class ConsultaIBGE:
    """Query the IBGE localidades API.

    Every call performs exactly one GET and keeps no state between calls,
    so repeated queries with the same input are interchangeable.

    Args:
        http_client: Transport used for requests; ``requests`` by default.
        settings: Resolved base URL and identity; loaded from config by default.
    """

    def __init__(
        self,
        http_client: HTTPClient | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._http: HTTPClient = http_client or DEFAULT_HTTP_CLIENT
        self.settings: Settings = settings or load_settings()
        self.user_agent: str = resolve_user_agent(
            self.settings.app_name,
            self.settings.app_version,
            self.settings.contact,
        )

    @property
    def base_url(self) -> str:
        return self.settings.base_url

    def estado_url(self, sigla: str) -> str:
        """URL of the states endpoint for ``sigla``."""

        return estado_url(self.base_url, sigla)

    def distrito_url(self, identificador: int) -> str:
        """URL of the districts endpoint for ``identificador``."""

        return distrito_url(self.base_url, identificador)

    def consultar_estado(self, sigla: str) -> str:
        """Return the raw JSON body describing the state ``sigla``.

        Raises:
            TypeError: ``sigla`` is None or not a string.
            IBGEConnectionError: The request failed at the transport level.
        """

        return self.consultar(self.estado_url(sigla)).text

    def consultar_distrito(self, identificador: int) -> str:
        """Return the raw JSON body describing district ``identificador``.

        Raises:
            TypeError: ``identificador`` is not an int.
            ValueError: ``identificador`` is negative.
            IBGEConnectionError: The request failed at the transport level.
        """

        return self.consultar(self.distrito_url(identificador)).text

    def obter_status_code(self, url: str) -> int:
        """Perform a GET on ``url`` and return only its HTTP status."""

        return self.consultar(url).status

    def status_estado(self, sigla: str) -> int:
        return self.obter_status_code(self.estado_url(sigla))

    def status_distrito(self, identificador: int) -> int:
        return self.obter_status_code(self.distrito_url(identificador))

    def consultar(self, url: str) -> HTTPResponse:
        """GET ``url`` and return the full response (status, body, headers)."""

        headers = {"Accept": _ACCEPT, "User-Agent": self.user_agent}
        logger.debug("GET %s", url)
        response = self._http.get(url, headers)
        logger.debug("GET %s -> %s (%d chars)", url, response.status, len(response.text))
        return response


_default_client: ConsultaIBGE | None = None


def _get_default_client() -> ConsultaIBGE:
    global _default_client
    if _default_client is None:
        _default_client = ConsultaIBGE()
    return _default_client


def configure_default_client(client: ConsultaIBGE | None) -> None:
    """Replace the client used by module-level helpers (``None`` resets it)."""

    global _default_client
    _default_client = client


def consultar_estado(sigla: str) -> str:
    """Module-level variant of :meth:`ConsultaIBGE.consultar_estado`."""

    return _get_default_client().consultar_estado(sigla)


def consultar_distrito(identificador: int) -> str:
    """Module-level variant of :meth:`ConsultaIBGE.consultar_distrito`."""

    return _get_default_client().consultar_distrito(identificador)


def obter_status_code(url: str) -> int:
    """Module-level variant of :meth:`ConsultaIBGE.obter_status_code`."""

    return _get_default_client().obter_status_code(url)


__all__ = [
    "ConsultaIBGE",
    "configure_default_client",
    "consultar_distrito",
    "consultar_estado",
    "obter_status_code",
]
