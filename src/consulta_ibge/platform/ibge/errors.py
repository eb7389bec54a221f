"""Exceptions raised by the IBGE client."""

from __future__ import annotations


class IBGEError(Exception):
    """Base class for consulta-ibge errors."""


class IBGEConnectionError(IBGEError, OSError):
    """The request could not be sent or its response could not be read."""

    def __init__(self, url: str, reason: BaseException | str) -> None:
        self.url: str = url
        self.reason: BaseException | str = reason
        super().__init__(f"request to {url} failed: {reason}")


__all__ = ["IBGEConnectionError", "IBGEError"]
