"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final


@final
@dataclass(slots=True)
class EstadoArgs:
    """Command line arguments for the ``estado`` subcommand."""

    command: Literal["estado"]
    sigla: str
    status: bool
    pretty: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class DistritoArgs:
    """Command line arguments for the ``distrito`` subcommand."""

    command: Literal["distrito"]
    identificador: int
    status: bool
    pretty: bool
    verbose: bool
    quiet: bool


CLIArgs = EstadoArgs | DistritoArgs

__all__ = ["CLIArgs", "DistritoArgs", "EstadoArgs"]
