"""Where: src/consulta_ibge/platform/ibge/http_client.py
What: HTTP adapter performing plain GET requests for the IBGE client.
Why: Decouple network concerns so tests can substitute a fixture transport.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol, cast

import requests

from consulta_ibge.platform.logging import logger

from .errors import IBGEConnectionError


@dataclass(frozen=True, slots=True)
class HTTPResponse:
    """Represent an HTTP response as seen by the IBGE client."""

    status: int
    text: str
    headers: dict[str, str] = field(default_factory=dict)


class HTTPClient(Protocol):
    """Protocol for HTTP clients able to perform a GET request."""

    def get(self, url: str, headers: dict[str, str]) -> HTTPResponse:
        ...


class RequestsHTTPClient:
    """Perform GET requests with ``requests``.

    No retries and no timeout beyond the library default. Any
    ``requests.RequestException`` is re-raised as
    :class:`IBGEConnectionError`.
    """

    def __init__(self, session: requests.Session | None = None) -> None:
        self._session: requests.Session | None = session

    def get(self, url: str, headers: dict[str, str]) -> HTTPResponse:
        getter = self._session.get if self._session is not None else requests.get
        try:
            with getter(url, headers=headers) as response:
                status = int(response.status_code)
                header_items = cast(Iterable[tuple[str, str]], response.headers.items())
                response_headers = {str(key): str(value) for key, value in header_items}
                if response.encoding is None:
                    # IBGE sends application/json without a charset
                    response.encoding = "utf-8"
                text = response.text
        except requests.RequestException as exc:
            logger.warning("IBGE request error: %s", exc)
            raise IBGEConnectionError(url, exc) from exc

        return HTTPResponse(status=status, text=text, headers=response_headers)


DEFAULT_HTTP_CLIENT = RequestsHTTPClient()


__all__ = [
    "DEFAULT_HTTP_CLIENT",
    "HTTPClient",
    "HTTPResponse",
    "RequestsHTTPClient",
]
