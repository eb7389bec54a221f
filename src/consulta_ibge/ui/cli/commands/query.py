"""src/consulta_ibge/ui/cli/commands/query.py
What: Run an estado or distrito query and render the outcome.
Why: Keep request dispatch apart from argument parsing and the entry point.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import final

from consulta_ibge.platform.ibge import ConsultaIBGE
from consulta_ibge.platform.logging import logger
from consulta_ibge.ui.cli.args.options import CLIArgs, EstadoArgs
from consulta_ibge.ui.cli.display import ResponseDisplay


@final
class QueryCommand:
    """Execute a single query against the IBGE API."""

    def __init__(
        self,
        args: CLIArgs,
        *,
        client_factory: Callable[[], ConsultaIBGE] | None = None,
        display: ResponseDisplay | None = None,
    ) -> None:
        self._args = args
        self._client_factory = client_factory or ConsultaIBGE
        self._display = display or ResponseDisplay()

    def execute(self) -> int:
        """Perform the request and return the process exit code.

        With ``--status`` the status is printed and the exit code is 0.
        Otherwise the body is printed and a non-2xx status yields 1.

        Raises:
            IBGEConnectionError: The request failed at the transport level.
        """
        client = self._client_factory()
        args = self._args

        if isinstance(args, EstadoArgs):
            url = client.estado_url(args.sigla)
        else:
            url = client.distrito_url(args.identificador)

        if args.status:
            self._display.show_status(client.obter_status_code(url))
            return 0

        # One request serves both the body and the status check.
        response = client.consultar(url)
        self._display.show_body(response.text, pretty=args.pretty)
        if not 200 <= response.status < 300:
            logger.error("IBGE answered HTTP %s for %s", response.status, url)
            return 1
        return 0
