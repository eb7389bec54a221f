"""Where: src/consulta_ibge/config/settings.py
What: Runtime settings derived from the persisted configuration.
Why: Give the HTTP layer plain values without repeating file I/O.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

from consulta_ibge.config.config import (
    DEFAULT_APP_NAME,
    DEFAULT_APP_VERSION,
    DEFAULT_BASE_URL,
    Config,
)

ENV_BASE_URL: Final[str] = "CONSULTA_IBGE_BASE_URL"

ESTADOS_PATH: Final[str] = "estados"
DISTRITOS_PATH: Final[str] = "distritos"


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved values used to build requests."""

    base_url: str
    app_name: str
    app_version: str
    contact: str


def load_settings(config: Config | None = None) -> Settings:
    """Resolve settings from ``config`` (the loaded singleton by default).

    ``CONSULTA_IBGE_BASE_URL`` wins over the configured base URL.
    """

    cfg = config if config is not None else Config.load()
    base_url = (os.getenv(ENV_BASE_URL) or "").strip() or cfg.base_url or DEFAULT_BASE_URL
    return Settings(
        base_url=base_url.rstrip("/"),
        app_name=cfg.app_name or DEFAULT_APP_NAME,
        app_version=cfg.app_version or DEFAULT_APP_VERSION,
        contact=cfg.contact or "",
    )


__all__ = [
    "DISTRITOS_PATH",
    "ENV_BASE_URL",
    "ESTADOS_PATH",
    "Settings",
    "load_settings",
]
