"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from consulta_ibge.config.config import Config
from consulta_ibge.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from consulta_ibge.shared.ufs import is_known_sigla
from consulta_ibge.ui.cli.args.options import CLIArgs, DistritoArgs, EstadoArgs


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid district identifier: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"district identifier must be non-negative: {number}")
    return number


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="consulta-ibge",
            description="Query the IBGE localidades API for states and districts.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        estado_parser = subparsers.add_parser(
            "estado",
            help="Fetch a state by its two-letter sigla (e.g. SP)",
        )
        _ = estado_parser.add_argument(
            "sigla",
            type=str,
            help="State abbreviation, sent verbatim",
            metavar="SIGLA",
        )
        ArgumentParser._add_common_options(estado_parser)

        distrito_parser = subparsers.add_parser(
            "distrito",
            help="Fetch a district by its numeric identifier",
        )
        _ = distrito_parser.add_argument(
            "identificador",
            type=_non_negative_int,
            help="District identifier (e.g. 520005005)",
            metavar="ID",
        )
        ArgumentParser._add_common_options(distrito_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: On usage errors.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "estado":
            return ArgumentParser._process_estado(parsed_args)

        if command == "distrito":
            return DistritoArgs(
                command="distrito",
                identificador=parsed_args.identificador,
                status=parsed_args.status,
                pretty=parsed_args.pretty,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_common_options(parser: argparse.ArgumentParser) -> None:
        """Options shared by every query subcommand."""

        _ = parser.add_argument(
            "--status",
            action="store_true",
            help="Print only the HTTP status code",
        )
        _ = parser.add_argument(
            "--pretty",
            action="store_true",
            help="Pretty-print the JSON body",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show request details",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )

    @staticmethod
    def _process_estado(parsed_args: argparse.Namespace) -> EstadoArgs:
        sigla: str = parsed_args.sigla
        if not is_known_sigla(sigla):
            if is_known_sigla(sigla.strip().upper()):
                logger.warning(
                    "Unknown sigla %r; IBGE expects uppercase codes such as %r",
                    sigla,
                    sigla.strip().upper(),
                )
            else:
                logger.warning("Unknown sigla %r; querying anyway", sigla)

        return EstadoArgs(
            command="estado",
            sigla=sigla,
            status=parsed_args.status,
            pretty=parsed_args.pretty,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
