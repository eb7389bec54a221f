"""Render IBGE responses on the terminal."""

from __future__ import annotations

import json
from typing import final

from rich.console import Console

from consulta_ibge.platform.logging import logger


@final
class ResponseDisplay:
    """Write response bodies and status codes to stdout."""

    def __init__(self, console: Console | None = None) -> None:
        self.console: Console = console or Console()

    def show_body(self, body: str, *, pretty: bool = False) -> None:
        """Print ``body`` verbatim, or as indented JSON when ``pretty``.

        Bodies that are not valid JSON fall back to verbatim output.
        """
        if pretty:
            try:
                self.console.print_json(body)
                return
            except json.JSONDecodeError as exc:
                logger.warning("Response is not valid JSON (%s); printing raw body", exc)

        # Raw write: Rich rendering drops control characters like \r
        self.console.file.write(body)
        self.console.file.write("\n")

    def show_status(self, status: int) -> None:
        self.console.out(str(status), highlight=False)
