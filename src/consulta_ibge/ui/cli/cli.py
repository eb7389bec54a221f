"""Command line interface for consulta-ibge."""

import sys
from typing import final

from consulta_ibge.platform.ibge import IBGEConnectionError
from consulta_ibge.platform.logging import logger
from consulta_ibge.ui.cli.args import ArgumentParser
from consulta_ibge.ui.cli.args.options import CLIArgs
from consulta_ibge.ui.cli.commands import QueryCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            exit_code = QueryCommand(args).execute()
            if exit_code:
                sys.exit(exit_code)

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except IBGEConnectionError as e:
            logger.error("Could not reach IBGE: %s", e)
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures leave through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
