"""Where: src/consulta_ibge/platform/ibge/user_agent.py
What: Build the User-Agent string sent to the IBGE API.
Why: Keep identity formatting out of the transport and the client.
"""

from __future__ import annotations

import os
from typing import Final

ENV_USER_AGENT: Final[str] = "IBGE_USER_AGENT"


def format_user_agent(app_name: str, app_version: str, contact: str) -> str:
    """Return ``App/Version (contact)`` when contact information is available."""

    stripped = contact.strip()
    if stripped:
        return f"{app_name}/{app_version} ({stripped})"
    return f"{app_name}/{app_version}"


def resolve_user_agent(app_name: str, app_version: str, contact: str) -> str:
    """Prefer ``IBGE_USER_AGENT`` over the configured identity."""

    env = (os.getenv(ENV_USER_AGENT) or "").strip()
    if env:
        return env
    return format_user_agent(app_name, app_version, contact)


__all__ = [
    "ENV_USER_AGENT",
    "format_user_agent",
    "resolve_user_agent",
]
