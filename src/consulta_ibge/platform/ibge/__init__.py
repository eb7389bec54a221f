"""IBGE localidades client package.

Exposes the :class:`ConsultaIBGE` facade, its module-level helpers and the
transport protocol used to swap the network out in tests.
"""

from .client import (
    ConsultaIBGE,
    configure_default_client,
    consultar_distrito,
    consultar_estado,
    obter_status_code,
)
from .errors import IBGEConnectionError, IBGEError
from .http_client import HTTPClient, HTTPResponse, RequestsHTTPClient

__all__ = [
    "ConsultaIBGE",
    "HTTPClient",
    "HTTPResponse",
    "IBGEConnectionError",
    "IBGEError",
    "RequestsHTTPClient",
    "configure_default_client",
    "consultar_distrito",
    "consultar_estado",
    "obter_status_code",
]
